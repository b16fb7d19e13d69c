from typing import List
from eth_typing import (
    BlockNumber,
    HexStr,
)
from pydantic import BaseModel

class LogEntry(BaseModel):
    model_config = {
        "arbitrary_types_allowed": False,
        "frozen": True,
    }

    address: str
    block_hash: HexStr
    block_number: BlockNumber
    data: HexStr
    log_index: int
    removed: bool = False
    # topics[0] is the event signature hash, the rest are indexed arguments
    topics: List[HexStr]
    transaction_hash: HexStr
    transaction_index: int
