from batch_scanner.utils import hex_to_str

class BlockHeaderParser:
    @staticmethod
    def parse_raw(raw_block: dict) -> dict:
        return {
            'base_fee_per_gas': raw_block.get('baseFeePerGas'),
            'blob_gas_used': raw_block.get('blobGasUsed'),
            'excess_blob_gas': raw_block.get('excessBlobGas'),
            'hash': hex_to_str(raw_block['hash']),
            'number': raw_block['number'],
            'timestamp': raw_block['timestamp'],
        }
