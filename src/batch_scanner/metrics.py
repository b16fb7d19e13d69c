import time
from functools import wraps
from prometheus_client import Counter, Histogram, start_http_server
from loguru import logger

# Scan metrics
CHUNKS_SCANNED = Counter(
    'scanner_chunks_scanned_total',
    'Total number of block chunks scanned'
)

CHUNK_ERRORS = Counter(
    'scanner_chunk_errors_total',
    'Total number of block chunks skipped because of an error'
)

EVENTS_REPORTED = Counter(
    'scanner_events_reported_total',
    'Total number of batch events decoded, enriched and reported',
    ['event']
)

# RPC metrics
RPC_REQUESTS = Counter(
    'scanner_rpc_requests_total',
    'Total number of RPC requests made',
    ['method']
)

RPC_ERRORS = Counter(
    'scanner_rpc_errors_total',
    'Total number of RPC errors encountered',
    ['method']
)

RPC_LATENCY = Histogram(
    'scanner_rpc_latency_seconds',
    'RPC request latency',
    ['method'],
    buckets=[0.025, 0.05, 0.075, 0.1, 0.15, 0.2, 0.3, 0.5, 1.0, 5.0, 10.0]
)

def track_rpc(method: str):
    """
    Decorator recording request count, error count and latency of an async RPC call.

    :param method: str, JSON-RPC method name used as the metric label
    :return: function, decorated function
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
            except Exception:
                RPC_ERRORS.labels(method=method).inc()
                raise
            RPC_REQUESTS.labels(method=method).inc()
            RPC_LATENCY.labels(method=method).observe(time.time() - start_time)
            return result

        return wrapper
    return decorator

def start_metrics_server(port: int = 8000, addr: str = '0.0.0.0'):
    """Start Prometheus metrics server

    Args:
        port (int): Port to listen on
        addr (str): Address to bind to (default: all interfaces)
    """
    logger.info(f"Starting Prometheus metrics server on {addr}:{port}")
    start_http_server(port, addr)
