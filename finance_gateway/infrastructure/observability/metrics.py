"""Prometheus metrics for record store health, summary fallbacks and budget status"""

from prometheus_client import Counter, Histogram

from finance_gateway.domain.models import BudgetStatus

# Dashboard metrics
summary_counter = Counter(
    "finance_summary_total",
    "Dashboard summaries computed",
    ["outcome"],  # computed | fallback
)

budget_status_counter = Counter(
    "finance_budget_status_total",
    "Budget statuses served",
    ["status"],  # on_track | warning | exceeded
)

# Record store metrics
record_store_latency_histogram = Histogram(
    "record_store_latency_seconds",
    "Record store response time",
    ["operation"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

record_store_failures_counter = Counter(
    "record_store_failures_total",
    "Failed record store calls",
    ["operation"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_summary(fallback: bool) -> None:
    summary_counter.labels(outcome="fallback" if fallback else "computed").inc()


def record_budget_status(status: BudgetStatus) -> None:
    budget_status_counter.labels(status=status.value).inc()
