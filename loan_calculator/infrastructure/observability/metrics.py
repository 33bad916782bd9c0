"""Prometheus metrics for quote outcomes, principal distribution and schedule lengths"""

from prometheus_client import Counter, Histogram

# Quote metrics
quote_counter = Counter(
    "loan_quote_total",
    "Total affordability quotes requested",
    ["outcome"],  # ok | missing_field | not_a_number | tenor_out_of_range | ...
)

principal_bucket_counter = Counter(
    "loan_principal_bucket",
    "Quoted maximum principals by bucket",
    ["bucket"],  # 0-5k, 5k-20k, 20k-100k, 100k+
)

# Schedule metrics
schedule_rows_histogram = Histogram(
    "loan_schedule_rows",
    "Rows per generated repayment schedule",
    buckets=[1, 6, 12, 24, 60, 120, 240, 360],
)

schedule_early_payoff_counter = Counter(
    "loan_schedule_early_payoff_total",
    "Schedules paid off before the full tenor",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(max_principal: float) -> None:
    """Record a successful quote and bucket its principal"""
    quote_counter.labels(outcome="ok").inc()

    if max_principal < 5_000:
        bucket = "0-5k"
    elif max_principal < 20_000:
        bucket = "5k-20k"
    elif max_principal < 100_000:
        bucket = "20k-100k"
    else:
        bucket = "100k+"

    principal_bucket_counter.labels(bucket=bucket).inc()


def record_validation_failure(code: str) -> None:
    """Count a rejected quote by error code"""
    quote_counter.labels(outcome=code).inc()


def record_schedule(months_requested: int, rows_generated: int) -> None:
    """Record schedule length and early payoff"""
    schedule_rows_histogram.observe(rows_generated)
    if rows_generated < months_requested:
        schedule_early_payoff_counter.inc()
