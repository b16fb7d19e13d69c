from batch_scanner.utils import hex_to_str

class TransactionParser:
    @staticmethod
    def parse_raw(raw_tx: dict) -> dict:
        return {
            'block_number': raw_tx.get('blockNumber'),
            'blob_versioned_hashes': [hex_to_str(h) for h in raw_tx.get('blobVersionedHashes', [])],
            'gas': raw_tx['gas'],
            'gas_price': raw_tx.get('gasPrice'),
            'hash': hex_to_str(raw_tx['hash']),
            'max_fee_per_blob_gas': raw_tx.get('maxFeePerBlobGas'),
            'max_fee_per_gas': raw_tx.get('maxFeePerGas'),
            'max_priority_fee_per_gas': raw_tx.get('maxPriorityFeePerGas'),
            'value': raw_tx.get('value', 0),
        }

class ReceiptParser:
    @staticmethod
    def parse_raw(receipt: dict) -> dict:
        return {
            'blob_gas_price': receipt.get('blobGasPrice'),
            'blob_gas_used': receipt.get('blobGasUsed'),
            'block_hash': hex_to_str(receipt['blockHash']),
            'block_number': receipt['blockNumber'],
            'effective_gas_price': receipt.get('effectiveGasPrice'),
            'gas_used': receipt['gasUsed'],
            'status': receipt.get('status'),
            'transaction_hash': hex_to_str(receipt['transactionHash']),
        }
