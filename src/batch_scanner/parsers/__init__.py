from .blocks import BlockHeaderParser
from .logs import LogParser
from .transactions import ReceiptParser, TransactionParser

__all__ = [
    "BlockHeaderParser",
    "LogParser",
    "ReceiptParser",
    "TransactionParser",
]
