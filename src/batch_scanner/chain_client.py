from aiohttp import ClientTimeout
from loguru import logger
from typing import Any, List
from urllib.parse import urlparse
from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.types import BlockIdentifier, FilterParams

from batch_scanner.metrics import track_rpc


class ChainClient:
    """Async JSON-RPC client for the handful of calls the scanner makes.

    Errors from the provider are logged and re-raised; callers decide whether
    they are fatal.
    """

    def __init__(self, rpc_url: str, timeout: float = 30) -> None:
        # Only log the host, provider URLs usually embed an API key
        logger.info(f"Initializing ChainClient for RPC host: {urlparse(rpc_url).hostname}")
        self.rpc_url = rpc_url
        self.w3 = AsyncWeb3(AsyncHTTPProvider(
            rpc_url,
            request_kwargs={'timeout': ClientTimeout(total=timeout)}
        ))

    async def connect(self) -> None:
        if not await self.w3.is_connected():
            raise ConnectionError(f"Failed to connect to RPC host {urlparse(self.rpc_url).hostname}")
        logger.info("Connected to RPC provider")

    @track_rpc('eth_getBlockByNumber')
    async def get_header(self, block_identifier: BlockIdentifier) -> Any:
        try:
            return await self.w3.eth.get_block(block_identifier, full_transactions=False)
        except Exception as e:
            logger.debug(f"Failed to get block {block_identifier}: {type(e).__name__}: {str(e)}")
            raise

    @track_rpc('eth_getLogs')
    async def get_logs(self, filter_params: FilterParams) -> List[Any]:
        try:
            return await self.w3.eth.get_logs(filter_params)
        except Exception as e:
            logger.debug(
                f"Failed to get logs for blocks {filter_params.get('fromBlock')}-{filter_params.get('toBlock')}: "
                f"{type(e).__name__}: {str(e)}"
            )
            raise

    @track_rpc('eth_getTransactionByHash')
    async def get_transaction(self, transaction_hash: str) -> Any:
        try:
            return await self.w3.eth.get_transaction(transaction_hash)
        except Exception as e:
            logger.debug(f"Failed to get transaction {transaction_hash}: {type(e).__name__}: {str(e)}")
            raise

    @track_rpc('eth_getTransactionReceipt')
    async def get_transaction_receipt(self, transaction_hash: str) -> Any:
        try:
            return await self.w3.eth.get_transaction_receipt(transaction_hash)
        except Exception as e:
            logger.debug(f"Failed to get receipt for transaction {transaction_hash}: {type(e).__name__}: {str(e)}")
            raise
