from loguru import logger
from pydantic import ValidationError

from batch_scanner.events import BatchEvent, EnrichedRecord
from batch_scanner.exceptions import (
    HeaderUnavailableError,
    PendingTransactionError,
    ReceiptUnavailableError,
    TransactionUnavailableError,
)
from batch_scanner.fees import calc_blob_base_fee, transaction_cost
from batch_scanner.parsers import BlockHeaderParser, ReceiptParser, TransactionParser
from batch_scanner.rpc_types import BlockHeader, LogEntry, Receipt, Transaction


async def enrich(client, event_name: str, event: BatchEvent, log: LogEntry, fork: str = "cancun") -> EnrichedRecord:
    """Attach transaction cost and block fees to a decoded batch event.

    Runs transaction -> receipt -> header lookups one after the other. Each step
    raises its own EnrichmentError subclass so the caller can tell a skippable
    header miss apart from a provider inconsistency.
    """
    tx_hash = log.transaction_hash

    try:
        raw_tx = await client.get_transaction(tx_hash)
        tx = Transaction(**TransactionParser.parse_raw(raw_tx))
    except (KeyError, TypeError, ValidationError) as e:
        raise TransactionUnavailableError(f"Malformed {event_name} transaction {tx_hash}: {e}", tx_hash) from e
    except Exception as e:
        raise TransactionUnavailableError(f"Failed to get {event_name} transaction {tx_hash}: {e}", tx_hash) from e

    # Pending transactions have no receipt yet
    if tx.is_pending:
        raise PendingTransactionError(f"{event_name} transaction {tx_hash} is still pending", tx_hash)

    try:
        raw_receipt = await client.get_transaction_receipt(tx_hash)
        receipt = Receipt(**ReceiptParser.parse_raw(raw_receipt))
    except Exception as e:
        raise ReceiptUnavailableError(f"Failed to get {event_name} transaction receipt {tx_hash}: {e}", tx_hash) from e

    try:
        raw_header = await client.get_header(receipt.block_number)
        header = BlockHeader(**BlockHeaderParser.parse_raw(raw_header))
    except Exception as e:
        raise HeaderUnavailableError(
            f"Failed to get block header {receipt.block_number}: {e}",
            tx_hash,
            block_number=receipt.block_number,
        ) from e

    blob_base_fee = None
    if header.excess_blob_gas is not None:
        blob_base_fee = calc_blob_base_fee(header.excess_blob_gas, fork)
    else:
        logger.debug(f"Block {header.number} has no excess blob gas, skipping blob base fee")

    return EnrichedRecord(
        event_name=event_name,
        event=event,
        transaction_hash=tx_hash,
        block_number=receipt.block_number,
        tx_cost=transaction_cost(tx),
        base_fee=header.base_fee_per_gas,
        blob_base_fee=blob_base_fee,
    )
