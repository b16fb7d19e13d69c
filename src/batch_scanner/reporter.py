from loguru import logger

from batch_scanner.events import EnrichedRecord
from batch_scanner.metrics import EVENTS_REPORTED


def report(record: EnrichedRecord) -> None:
    event = record.event
    logger.bind(
        event_name=record.event_name,
        transaction_hash=record.transaction_hash,
        block_number=record.block_number,
        tx_cost=record.tx_cost,
        base_fee=record.base_fee,
        blob_base_fee=record.blob_base_fee,
        **event.model_dump(),
    ).info(
        f"{record.event_name} event "
        f"batch_index={event.batch_index} "
        f"batch_hash={event.batch_hash} "
        f"tx_hash={record.transaction_hash} "
        f"block_number={record.block_number} "
        f"tx_fee={record.tx_cost} "
        f"base_fee={record.base_fee} "
        f"blob_base_fee={record.blob_base_fee}"
    )
    EVENTS_REPORTED.labels(event=record.event_name).inc()
