"""Prometheus metrics for the User Admission service.

Business Metrics:
- user_admission_total: Admission attempts by outcome and rejection reason
- user_admission_credit_limit_bucket: Computed credit limits by bucket and tier

Technical Metrics:
- user_admission_latency_seconds: Admission attempt latency
- user_admission_failures_total: Data-integrity failures by error type
"""

import time
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest

from .config import settings


# =============================================================================
# Business Metrics
# =============================================================================

admission_total = Counter(
    "user_admission_total",
    "Total number of admission attempts that reached a decision",
    ["outcome", "reason"],  # admitted/rejected, rejection reason or "none"
)

credit_limit_bucket = Counter(
    "user_admission_credit_limit_bucket",
    "Computed credit limits by bucket",
    ["bucket", "client_type"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

admission_latency = Histogram(
    "user_admission_latency_seconds",
    "Admission attempt latency in seconds",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

admission_failures = Counter(
    "user_admission_failures_total",
    "Total number of admission attempts aborted by a data-integrity failure",
    ["error_type"],  # CLIENT_NOT_FOUND, INVALID_CLIENT_TYPE, ...
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_admission(admitted: bool, reason: Optional[str] = None) -> None:
    """Record an admission outcome in metrics."""
    if not settings.metrics_enabled:
        return

    outcome = "admitted" if admitted else "rejected"
    admission_total.labels(outcome=outcome, reason=reason or "none").inc()


def record_credit_limit(bucket: str, client_type: str) -> None:
    """Record a computed credit limit."""
    if not settings.metrics_enabled:
        return

    credit_limit_bucket.labels(bucket=bucket, client_type=client_type).inc()


def record_admission_failure(error_type: str) -> None:
    """Record an admission attempt aborted by a data-integrity failure."""
    if not settings.metrics_enabled:
        return

    admission_failures.labels(error_type=error_type).inc()


@contextmanager
def track_admission_latency() -> Generator[None, None, None]:
    """Context manager to track admission latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            admission_latency.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)

