"""Prometheus metric definitions for the transaction form service."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


validation_failures_total = Counter(
    "validation_failures_total",
    "Validation errors raised per field on submit attempts",
    ["service", "field"],
)
submission_attempts_total = Counter("submission_attempts_total", "Total outbound submissions", ["service"])
submission_success_total = Counter("submission_success_total", "Total successful submissions", ["service"])
submission_failure_total = Counter(
    "submission_failure_total",
    "Total failed submissions",
    ["service", "reason"],
)
submission_latency_seconds = Histogram(
    "submission_latency_seconds",
    "Outbound submission latency seconds",
    ["service"],
)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
