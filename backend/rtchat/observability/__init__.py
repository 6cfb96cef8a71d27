"""Observability package for the realtime conversation service."""

from rtchat.observability.metrics import (
    set_active_subscriptions,
    observe_request_latency,
    increment_messages_created,
    increment_broadcast_delivery,
    increment_auto_reply,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    DeliveryOutcome,
    AutoReplyOutcome,
)

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
