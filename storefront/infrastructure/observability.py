# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

REQUEST_LATENCY = Histogram(
    "storefront_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5),
)
REQUEST_COUNTER = Counter(
    "storefront_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "method", "status"),
)
LOGIN_COUNTER = Counter(
    "storefront_logins_total",
    "Login attempts by outcome",
    labelnames=("outcome",),
)
ACTIVE_SESSIONS = Gauge("storefront_active_sessions", "Sessions currently held in memory")


def observe_request(endpoint: str, method: str, status: int, duration: float) -> None:
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(duration)
    REQUEST_COUNTER.labels(endpoint=endpoint, method=method, status=str(status)).inc()


__all__ = [
    "ACTIVE_SESSIONS",
    "LOGIN_COUNTER",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "observe_request",
]
