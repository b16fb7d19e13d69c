from typing import Optional
from eth_typing import HexStr
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BaseBatchEvent(BaseModel):
    # ABI argument names are camelCase, fields are populated by alias
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }

    batch_index: int = Field(ge=0)
    batch_hash: HexStr

class CommitBatchEvent(BaseBatchEvent):
    pass

class FinalizeBatchEvent(BaseBatchEvent):
    state_root: HexStr
    withdraw_root: HexStr

BatchEvent = CommitBatchEvent | FinalizeBatchEvent

# Add new events here, keyed by ABI event name
EVENT_MODELS: dict[str, type[BaseBatchEvent]] = {
    "CommitBatch": CommitBatchEvent,
    "FinalizeBatch": FinalizeBatchEvent,
}


class EnrichedRecord(BaseModel):
    event_name: str
    event: BatchEvent
    transaction_hash: HexStr
    block_number: int
    tx_cost: int
    base_fee: Optional[int] = None
    blob_base_fee: Optional[int] = None
