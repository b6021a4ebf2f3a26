"""Prometheus metrics definitions for keymask."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "keymask_http_requests_total",
    "Total number of HTTP requests processed by the keymask API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "keymask_http_request_duration_seconds",
    "Latency of HTTP requests processed by the keymask API",
    ["method", "path"],
)

MASKED_VALUES = Counter(
    "keymask_masked_values_total",
    "Number of values masked, by format id",
    ["format_id"],
)

UNKNOWN_FORMATS = Counter(
    "keymask_unknown_format_requests_total",
    "Number of mask requests naming a format id that is not in the rule table",
    ["strict"],
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "MASKED_VALUES",
    "UNKNOWN_FORMATS",
]
