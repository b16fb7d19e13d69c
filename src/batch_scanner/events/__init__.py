from .abi import SCROLL_CHAIN_EVENTS_ABI
from .decoder import decode_log
from .models import (
    BaseBatchEvent,
    BatchEvent,
    CommitBatchEvent,
    EnrichedRecord,
    EVENT_MODELS,
    FinalizeBatchEvent,
)
from .schema import EventArgument, EventRegistry, EventSignature

# Events the scanner filters for at topic position 0
BATCH_EVENT_NAMES = ("CommitBatch", "FinalizeBatch")


def build_registry() -> EventRegistry:
    return EventRegistry.from_abi(SCROLL_CHAIN_EVENTS_ABI, names=BATCH_EVENT_NAMES)
