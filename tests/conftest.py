from typing import Dict, List, Optional, Tuple

import pytest
from eth_abi import encode
from hexbytes import HexBytes
from web3.exceptions import BlockNotFound, TransactionNotFound

from batch_scanner.events import build_registry

CONTRACT_ADDRESS = "0xa13baf47339d63b743e7da8741db5456dac1e556"
GWEI = 10**9


def tx_hash_for(n: int) -> str:
    return "0x" + n.to_bytes(32, "big").hex()


def make_raw_log(topics, data: bytes = b"", tx_hash: str = tx_hash_for(1), block_number: int = 100, log_index: int = 0) -> dict:
    """Log as web3 returns it from eth_getLogs"""
    return {
        "address": CONTRACT_ADDRESS,
        "blockHash": HexBytes(b"\x11" * 32),
        "blockNumber": block_number,
        "data": HexBytes(data),
        "logIndex": log_index,
        "removed": False,
        "topics": [HexBytes(topic) for topic in topics],
        "transactionHash": HexBytes(tx_hash),
        "transactionIndex": 0,
    }


def commit_batch_log(batch_index: int, batch_hash: bytes, **kwargs) -> dict:
    signature = build_registry().get("CommitBatch")
    topics = [signature.topic_hash, encode(["uint256"], [batch_index]), batch_hash]
    return make_raw_log(topics, **kwargs)


def finalize_batch_log(batch_index: int, batch_hash: bytes, state_root: bytes, withdraw_root: bytes, **kwargs) -> dict:
    signature = build_registry().get("FinalizeBatch")
    topics = [signature.topic_hash, encode(["uint256"], [batch_index]), batch_hash]
    data = encode(["bytes32", "bytes32"], [state_root, withdraw_root])
    return make_raw_log(topics, data=data, **kwargs)


class FakeChainClient:
    """In-memory stand-in for ChainClient that records every call"""

    def __init__(self) -> None:
        self.logs: Dict[Tuple[int, int], List[dict]] = {}
        self.failing_ranges = set()
        self.transactions: Dict[str, dict] = {}
        self.receipts: Dict[str, dict] = {}
        self.headers: Dict[object, dict] = {}
        self.calls: List[Tuple[str, object]] = []
        self.filters: List[dict] = []
        self.reachable = True

    def add_transaction(
        self,
        tx_hash: str,
        block_number: int = 100,
        pending: bool = False,
        excess_blob_gas: Optional[int] = 0,
        base_fee: int = 7 * GWEI,
        with_header: bool = True,
        with_receipt: bool = True,
    ) -> None:
        self.transactions[tx_hash] = {
            "hash": HexBytes(tx_hash),
            "blockNumber": None if pending else block_number,
            "gas": 100_000,
            "gasPrice": 20 * GWEI,
            "maxFeePerGas": 30 * GWEI,
            "maxPriorityFeePerGas": 1 * GWEI,
            "value": 0,
        }
        if pending:
            return
        if with_receipt:
            self.receipts[tx_hash] = {
                "transactionHash": HexBytes(tx_hash),
                "blockHash": HexBytes(b"\x22" * 32),
                "blockNumber": block_number,
                "gasUsed": 80_000,
                "effectiveGasPrice": 8 * GWEI,
                "status": 1,
            }
        if with_header:
            header = {
                "hash": HexBytes(b"\x22" * 32),
                "number": block_number,
                "timestamp": 1_700_000_000,
                "baseFeePerGas": base_fee,
            }
            if excess_blob_gas is not None:
                header["excessBlobGas"] = excess_blob_gas
                header["blobGasUsed"] = 0
            self.headers[block_number] = header

    async def connect(self) -> None:
        self.calls.append(("is_connected", None))
        if not self.reachable:
            raise ConnectionError("Failed to connect to RPC host eth-mainnet.example.org")

    async def get_logs(self, filter_params: dict) -> List[dict]:
        block_range = (filter_params["fromBlock"], filter_params["toBlock"])
        self.calls.append(("eth_getLogs", block_range))
        self.filters.append(filter_params)
        if block_range in self.failing_ranges:
            raise ValueError(f"query returned more than 10000 results for {block_range}")
        return list(self.logs.get(block_range, []))

    async def get_transaction(self, tx_hash: str) -> dict:
        self.calls.append(("eth_getTransactionByHash", tx_hash))
        if tx_hash not in self.transactions:
            raise TransactionNotFound(f"Transaction with hash: {tx_hash} not found")
        return self.transactions[tx_hash]

    async def get_transaction_receipt(self, tx_hash: str) -> dict:
        self.calls.append(("eth_getTransactionReceipt", tx_hash))
        if tx_hash not in self.receipts:
            raise TransactionNotFound(f"Transaction with hash: {tx_hash} not found")
        return self.receipts[tx_hash]

    async def get_header(self, block_identifier) -> dict:
        self.calls.append(("eth_getBlockByNumber", block_identifier))
        if block_identifier not in self.headers:
            raise BlockNotFound(f"Block with id: {block_identifier} not found")
        return self.headers[block_identifier]

    def methods_called(self) -> List[str]:
        return [method for method, _ in self.calls]


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def client():
    return FakeChainClient()
