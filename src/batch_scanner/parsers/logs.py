from batch_scanner.utils import hex_to_str

class LogParser:
    @staticmethod
    def parse_raw(raw_log: dict) -> dict:
        return {
            'address': str(raw_log['address']),
            'block_hash': hex_to_str(raw_log['blockHash']),
            'block_number': raw_log['blockNumber'],
            'data': hex_to_str(raw_log['data']),
            'log_index': raw_log['logIndex'],
            'removed': raw_log.get('removed', False),
            'topics': [hex_to_str(topic) for topic in raw_log['topics']],
            'transaction_hash': hex_to_str(raw_log['transactionHash']),
            'transaction_index': raw_log['transactionIndex']
        }
