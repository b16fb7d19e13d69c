from typing import List, Optional
from pydantic import BaseModel


class Transaction(BaseModel):
    model_config = {
        "arbitrary_types_allowed": False
    }

    # None while the transaction is still pending
    block_number: Optional[int] = None
    blob_versioned_hashes: List[str] = []
    gas: int
    gas_price: Optional[int] = None
    hash: str
    max_fee_per_blob_gas: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None
    value: int = 0

    @property
    def is_pending(self) -> bool:
        return self.block_number is None

class Receipt(BaseModel):
    model_config = {
        "arbitrary_types_allowed": False
    }

    blob_gas_price: Optional[int] = None
    blob_gas_used: Optional[int] = None
    block_hash: str
    block_number: int
    effective_gas_price: Optional[int] = None
    gas_used: int
    status: Optional[int] = None
    transaction_hash: str
