"""Prometheus metrics for monitoring health band distribution and recommendations"""

from prometheus_client import Counter, Histogram

from credit_coach.domain.models import CreditHealthReport

# Evaluation metrics
evaluation_counter = Counter(
    "credit_coach_evaluation_total",
    "Total credit profile evaluations",
    ["band"],  # critical | at_risk | stable | strong | excellent
)

recommended_action_counter = Counter(
    "credit_coach_recommended_action_total",
    "Recommended actions issued by impact tier",
    ["impact"],  # high | medium | low
)

# Profile source metrics
profile_lookup_failures_counter = Counter(
    "credit_coach_profile_lookup_failures_total",
    "Profile lookups that found no profile or hit an unreadable source",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(report: CreditHealthReport) -> None:
    """Record band and action-impact distribution for a finished evaluation"""
    evaluation_counter.labels(band=report.band).inc()
    for action in report.recommended_actions:
        recommended_action_counter.labels(impact=action.impact).inc()
