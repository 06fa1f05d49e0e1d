"""
Prometheus metrics for HTTP requests and classified errors.

The collectors register with prometheus_client's default registry, which
/metrics exposes together with the process collectors.
"""

from prometheus_client import Counter, Histogram

from ..error_types import ErrorKind

HTTP_REQUESTS_TOTAL = Counter(
    "arcade_http_requests_total",
    "Total number of HTTP requests handled, by method and status code",
    ["method", "status"],
)
HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "arcade_http_request_duration_seconds",
    "Time spent handling HTTP requests",
    ["method"],
)
ERRORS_TOTAL = Counter(
    "arcade_errors_total",
    "Total number of classified errors returned to clients, by error kind",
    ["kind"],
)


def observe_request(method: str, status_code: int, seconds: float) -> None:
    HTTP_REQUESTS_TOTAL.labels(method=method, status=str(status_code)).inc()
    HTTP_REQUEST_DURATION_SECONDS.labels(method=method).observe(seconds)


def observe_error(kind: ErrorKind) -> None:
    ERRORS_TOTAL.labels(kind=kind.name.lower()).inc()
