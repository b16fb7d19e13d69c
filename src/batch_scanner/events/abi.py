# Batch lifecycle events emitted by the Scroll rollup contract on L1
SCROLL_CHAIN_EVENTS_ABI = [
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "uint256", "name": "batchIndex", "type": "uint256"},
            {"indexed": True, "internalType": "bytes32", "name": "batchHash", "type": "bytes32"},
        ],
        "name": "CommitBatch",
        "type": "event",
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "uint256", "name": "batchIndex", "type": "uint256"},
            {"indexed": True, "internalType": "bytes32", "name": "batchHash", "type": "bytes32"},
            {"indexed": False, "internalType": "bytes32", "name": "stateRoot", "type": "bytes32"},
            {"indexed": False, "internalType": "bytes32", "name": "withdrawRoot", "type": "bytes32"},
        ],
        "name": "FinalizeBatch",
        "type": "event",
    },
]
