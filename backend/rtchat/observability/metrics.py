"""
Prometheus Metrics for the realtime conversation service.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Gauge: Value goes up/down (current count, e.g., active subscriptions)
    - Counter: Value only goes up (total count, e.g., deliveries)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
ACTIVE_SUBSCRIPTIONS = Gauge(
    "rtchat_active_subscriptions", "Number of live realtime subscriptions"
)

REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5],
)

MESSAGES_CREATED_TOTAL = Counter(
    "rtchat_messages_created_total",
    "Total number of messages appended to conversations",
    ["author_kind"],
)

BROADCAST_DELIVERIES_TOTAL = Counter(
    "rtchat_broadcast_deliveries_total",
    "Total number of per-connection broadcast delivery attempts by outcome",
    ["outcome"],
)

AUTO_REPLIES_TOTAL = Counter(
    "rtchat_auto_replies_total",
    "Total number of deferred auto reply runs by outcome",
    ["outcome"],
)

ERRORS_TOTAL = Counter(
    "rtchat_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for rtchat_errors_total metric."""

    BACKGROUND_TASK_FAILED = "background_task_failed"
    AUTO_REPLY_FAILED = "auto_reply_failed"
    SUBSCRIPTION_FAILED = "subscription_failed"
    UNHANDLED = "unhandled"


class DeliveryOutcome:
    DELIVERED = "delivered"
    SKIPPED = "skipped"
    FAILED = "failed"


class AutoReplyOutcome:
    APPENDED = "appended"
    SKIPPED = "skipped"
    FAILED = "failed"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def set_active_subscriptions(count: int):
    """Integration point: infrastructure/realtime/in_memory_subscription_registry.py"""
    ACTIVE_SUBSCRIPTIONS.set(count)


def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.py RequestLatencyMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_messages_created(synthetic: bool):
    MESSAGES_CREATED_TOTAL.labels(author_kind="ai" if synthetic else "user").inc()


def increment_broadcast_delivery(outcome: str, count: int = 1):
    """Integration point: application/services/broadcast_dispatcher.py"""
    if count:
        BROADCAST_DELIVERIES_TOTAL.labels(outcome=outcome).inc(count)


def increment_auto_reply(outcome: str):
    """Integration point: application/services/auto_reply.py"""
    AUTO_REPLIES_TOTAL.labels(outcome=outcome).inc()


def increment_error(error_type: str):
    """
    Call to record an error occurrence.

    Integration points:
        - infrastructure/scheduling/asyncio_scheduler.py: background_task_failed
        - application/services/auto_reply.py: auto_reply_failed
        - presentation/api/cable.py: subscription_failed
        - presentation/errors.py: unhandled

    Args:
        error_type: Type of error
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "set_active_subscriptions",
    "observe_request_latency",
    "increment_messages_created",
    "increment_broadcast_delivery",
    "increment_auto_reply",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "DeliveryOutcome",
    "AutoReplyOutcome",
]
