from prometheus_client import Counter, Histogram

# Low-cardinality labels: operation names such as "files.search", never URLs.
REQUESTS = Counter(
    "ass_client_requests_total",
    "Total requests sent to the storage",
    ["method", "operation", "status"],
)

LATENCY = Histogram(
    "ass_client_request_duration_seconds",
    "Storage request latency in seconds",
    ["method", "operation"],
)


def record_request(method: str, operation: str, status: str, elapsed: float) -> None:
    REQUESTS.labels(method, operation, status).inc()
    LATENCY.labels(method, operation).observe(elapsed)
