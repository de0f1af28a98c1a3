"""Prometheus metrics for monitoring parse outcomes, health score tiers, and request latency"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

# Parser metrics
parsed_transaction_counter = Counter(
    "fin_parsed_transactions_total",
    "Transactions interpreted from free text",
    ["category", "type"],
)

amount_detection_counter = Counter(
    "fin_amount_detection_total",
    "Whether an amount was found in parsed text",
    ["outcome"],  # found | missing
)

# Scoring metrics
health_score_counter = Counter(
    "fin_health_score_total",
    "Financial health scores calculated",
    ["status"],  # Excellent | Good | Fair | Critical
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_parse(category: str, transaction_type: str, amount: Decimal) -> None:
    """Record parser metrics for category distribution and amount detection rate"""
    parsed_transaction_counter.labels(category=category, type=transaction_type).inc()
    outcome = "found" if amount > 0 else "missing"
    amount_detection_counter.labels(outcome=outcome).inc()


def record_health_score(status: str) -> None:
    health_score_counter.labels(status=status).inc()
