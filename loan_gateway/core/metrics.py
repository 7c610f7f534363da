"""Prometheus metrics for the Loan Gateway service.

Metrics are organized into two categories:

Business Metrics (for Product/Risk):
- loan_decision_total: Decisions by outcome
- loan_offer_amount: Approved loan amounts
- loan_offer_period_months: Approved loan periods
- loan_approval_rate: Running approval rate

Technical Metrics (for Engineering/SRE):
- loan_decision_latency_seconds: Decision computation latency
- loan_http_requests_total: HTTP requests by endpoint/status
- loan_http_request_latency_seconds: HTTP request latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Risk dashboards)
# =============================================================================

decision_total = Counter(
    "loan_decision_total",
    "Total number of loan decisions made",
    ["outcome"],  # approved, or the lower-case rejection reason
)

offer_amount = Histogram(
    "loan_offer_amount",
    "Approved loan amounts in euros",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

offer_period = Histogram(
    "loan_offer_period_months",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 30, 36, 42, 48],
)

approval_rate_gauge = Gauge(
    "loan_approval_rate",
    "Share of decisions that were approved since process start (0.0-1.0)",
)

# Track totals for computing rates
_approved_count = 0
_total_count = 0


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

decision_latency = Histogram(
    "loan_decision_latency_seconds",
    "Decision computation latency in seconds",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)

http_requests_total = Counter(
    "loan_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loan_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_decision(
    error_code: Optional[str],
    loan_amount: Optional[int] = None,
    loan_period: Optional[int] = None,
) -> None:
    """Record a decision in metrics."""
    global _approved_count, _total_count

    approved = error_code is None
    outcome = "approved" if approved else error_code.lower()
    decision_total.labels(outcome=outcome).inc()

    _total_count += 1
    if approved:
        _approved_count += 1
        if loan_amount is not None:
            offer_amount.observe(loan_amount)
        if loan_period is not None:
            offer_period.observe(loan_period)

    approval_rate_gauge.set(_approved_count / _total_count)


@contextmanager
def track_decision_latency() -> Generator[None, None, None]:
    """Context manager to track decision latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        decision_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
