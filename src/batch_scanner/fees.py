from batch_scanner.rpc_types import Transaction

# EIP-4844 blob fee market parameters
MIN_BASE_FEE_PER_BLOB_GAS = 1
GAS_PER_BLOB = 2**17

# The update fraction is raised by EIP-7691 in Prague
BLOB_BASE_FEE_UPDATE_FRACTION = {
    "cancun": 3338477,
    "prague": 5007716,
}


def fake_exponential(factor: int, numerator: int, denominator: int) -> int:
    """Integer approximation of factor * e ** (numerator / denominator), as defined in EIP-4844"""
    i = 1
    output = 0
    numerator_accum = factor * denominator
    while numerator_accum > 0:
        output += numerator_accum
        numerator_accum = (numerator_accum * numerator) // (denominator * i)
        i += 1
    return output // denominator

def calc_blob_base_fee(excess_blob_gas: int, fork: str = "cancun") -> int:
    try:
        update_fraction = BLOB_BASE_FEE_UPDATE_FRACTION[fork]
    except KeyError:
        raise ValueError(f"Unsupported fork: {fork}. Supported forks: {list(BLOB_BASE_FEE_UPDATE_FRACTION)}")
    return fake_exponential(MIN_BASE_FEE_PER_BLOB_GAS, excess_blob_gas, update_fraction)

def transaction_cost(tx: Transaction) -> int:
    """Maximum amount the sender can be charged: gas * fee cap + blob gas * blob fee cap + value"""
    # Dynamic fee transactions are capped by maxFeePerGas, legacy ones pay gasPrice
    fee_cap = tx.max_fee_per_gas if tx.max_fee_per_gas is not None else (tx.gas_price or 0)
    cost = tx.gas * fee_cap
    if tx.blob_versioned_hashes and tx.max_fee_per_blob_gas is not None:
        cost += len(tx.blob_versioned_hashes) * GAS_PER_BLOB * tx.max_fee_per_blob_gas
    return cost + tx.value
