from dataclasses import dataclass, field
from loguru import logger
from pydantic import ValidationError
from typing import Iterator, List, Tuple
from web3 import Web3

from batch_scanner.enricher import enrich
from batch_scanner.events import EventRegistry, decode_log
from batch_scanner.exceptions import DecodeError, EnrichmentError, FetchError, HeaderUnavailableError
from batch_scanner.metrics import CHUNKS_SCANNED, CHUNK_ERRORS
from batch_scanner.parsers import LogParser
from batch_scanner.reporter import report
from batch_scanner.rpc_types import LogEntry


@dataclass
class ScanSummary:
    head_block: int
    chunks: List[Tuple[int, int]] = field(default_factory=list)
    chunks_failed: int = 0
    events_reported: int = 0
    events_skipped: int = 0
    logs_ignored: int = 0

    @property
    def blocks_covered(self) -> int:
        return sum(to_block - from_block + 1 for from_block, to_block in self.chunks)


def iter_chunks(head_block: int, num_blocks: int, chunk_size: int) -> Iterator[Tuple[int, int]]:
    """Walk backwards from head_block in inclusive (from_block, to_block) ranges

    Exactly num_blocks blocks are covered: when num_blocks is not a multiple of
    chunk_size the last range is narrowed. Ranges never go below block 0.
    """
    if num_blocks <= 0 or chunk_size <= 0:
        raise ValueError(f"num_blocks and chunk_size must be positive, got {num_blocks} and {chunk_size}")

    lowest_block = max(head_block - num_blocks + 1, 0)
    to_block = head_block
    while to_block >= lowest_block:
        from_block = max(to_block - chunk_size + 1, lowest_block)
        yield from_block, to_block
        to_block = from_block - 1


class BatchEventScanner:
    def __init__(
        self,
        client,
        registry: EventRegistry,
        contract_address: str,
        num_blocks: int = 1000,
        chunk_size: int = 10,
        fork: str = "cancun",
    ) -> None:
        self.client = client
        self.registry = registry
        self.contract_address = Web3.to_checksum_address(contract_address)
        self.num_blocks = num_blocks
        self.chunk_size = chunk_size
        self.fork = fork

    async def fetch_logs(self, from_block: int, to_block: int) -> List[LogEntry]:
        """One eth_getLogs query for the inclusive range, in provider order"""
        filter_params = {
            'fromBlock': from_block,
            'toBlock': to_block,
            'address': self.contract_address,
            # Any of the registered events at position 0, no filter on indexed args
            'topics': [self.registry.topic_hashes],
        }
        try:
            raw_logs = await self.client.get_logs(filter_params)
        except Exception as e:
            raise FetchError(f"Failed to filter event logs for blocks {from_block}-{to_block}: {e}") from e

        try:
            return [LogEntry(**LogParser.parse_raw(raw_log)) for raw_log in raw_logs]
        except (KeyError, TypeError, ValidationError) as e:
            raise DecodeError(f"Malformed log returned for blocks {from_block}-{to_block}: {e}") from e

    async def process_logs(self, logs: List[LogEntry], summary: ScanSummary) -> None:
        for log in logs:
            signature = self.registry.match(log.topics[0]) if log.topics else None
            if signature is None:
                logger.debug(f"Ignoring log {log.log_index} in transaction {log.transaction_hash}: unknown event")
                summary.logs_ignored += 1
                continue

            event = decode_log(log, signature)
            try:
                record = await enrich(self.client, signature.name, event, log, self.fork)
            except HeaderUnavailableError as e:
                logger.warning(f"Skipping {signature.name} event for batch {event.batch_index}: {e}")
                summary.events_skipped += 1
                continue

            report(record)
            summary.events_reported += 1

    async def run(self, head_block: int) -> ScanSummary:
        summary = ScanSummary(head_block=head_block)

        for from_block, to_block in iter_chunks(head_block, self.num_blocks, self.chunk_size):
            summary.chunks.append((from_block, to_block))
            CHUNKS_SCANNED.inc()
            logger.info(f"Fetching batch event logs from block {from_block} to {to_block}")

            try:
                logs = await self.fetch_logs(from_block, to_block)
            except (FetchError, DecodeError) as e:
                logger.error(f"Failed to fetch batch event logs: {e}")
                CHUNK_ERRORS.inc()
                summary.chunks_failed += 1
                continue

            try:
                await self.process_logs(logs, summary)
            except (DecodeError, EnrichmentError) as e:
                logger.error(f"Failed to parse batch event logs for blocks {from_block}-{to_block}: {e}")
                CHUNK_ERRORS.inc()
                summary.chunks_failed += 1
                continue

        return summary
