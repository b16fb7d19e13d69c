from .blocks import BlockHeader
from .logs import LogEntry
from .transactions import Receipt, Transaction

__all__ = [
    "BlockHeader",
    "LogEntry",
    "Receipt",
    "Transaction",
]
