from typing import Optional
from pydantic import BaseModel

class BlockHeader(BaseModel):
    model_config = {
        "arbitrary_types_allowed": False,
    }

    base_fee_per_gas: Optional[int] = None
    # Only present from Cancun onwards
    blob_gas_used: Optional[int] = None
    excess_blob_gas: Optional[int] = None
    hash: str
    number: int
    timestamp: int
