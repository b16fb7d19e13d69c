import asyncio
import sys
import time
from dynaconf import ValidationError
from loguru import logger

from batch_scanner.chain_client import ChainClient
from batch_scanner.events import build_registry
from batch_scanner.exceptions import ConfigError
from batch_scanner.metrics import start_metrics_server
from batch_scanner.parsers import BlockHeaderParser
from batch_scanner.rpc_types import BlockHeader
from batch_scanner.scanner import BatchEventScanner
from batch_scanner.utils import load_config, setup_logging


async def main():
    try:
        config = load_config("config.yml", env_file=".env")
    except (ConfigError, ValidationError) as e:
        logger.critical(f"Configuration error: {e}")
        sys.exit(1)

    setup_logging(config.logging.level, config.logging.file)

    if config.metrics.enabled:
        start_metrics_server(config.metrics.port, addr=config.metrics.addr)

    client = ChainClient(config.rpc_provider_url, timeout=config.rpc.timeout)
    try:
        await client.connect()
    except Exception as e:
        logger.critical(f"Failed to connect to network: {e}")
        sys.exit(1)

    try:
        raw_header = await client.get_header(config.chain.head_block)
        head = BlockHeader(**BlockHeaderParser.parse_raw(raw_header))
    except Exception as e:
        logger.critical(f"Failed to get {config.chain.head_block} block header: {e}")
        sys.exit(1)

    registry = build_registry()
    scanner = BatchEventScanner(
        client,
        registry,
        contract_address=config.contract.address,
        num_blocks=config.scan.num_blocks,
        chunk_size=config.scan.chunk_size,
        fork=config.chain.fork,
    )

    logger.info(
        f"Scanning {config.scan.num_blocks} blocks back from {config.chain.head_block} block {head.number} "
        f"in chunks of {config.scan.chunk_size} for {', '.join(sig.name for sig in registry)} events"
    )

    start_time = time.time()
    summary = await scanner.run(head.number)
    elapsed_time = time.time() - start_time

    logger.info(
        f"Finished fetching and parsing batch event logs in {elapsed_time:.2f} seconds "
        f"({summary.blocks_covered} blocks, {len(summary.chunks)} chunks, {summary.chunks_failed} failed chunks, "
        f"{summary.events_reported} events reported, {summary.events_skipped} skipped)"
    )

def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Program interrupted by user. Exiting.")
    except Exception as e:
        logger.exception(f"An unexpected error occurred: {e}")
        sys.exit(1)

if __name__ == "__main__":
    run()
