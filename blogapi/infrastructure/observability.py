# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "blogapi_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
REQUEST_COUNTER = Counter(
    "blogapi_requests_total",
    "Number of processed requests",
    labelnames=("method", "endpoint", "status"),
)


def record_request(method: str, endpoint: str, status: int, duration: float) -> None:
    # endpoint is the matched route rule, never the raw path.
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(duration)
    REQUEST_COUNTER.labels(method=method, endpoint=endpoint, status=str(status)).inc()


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "record_request",
    "render_metrics",
]
