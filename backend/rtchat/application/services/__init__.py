"""
Application services - long-lived collaborators shared by handlers.

- authorization_gate.py   → credential resolution and ownership checks
- broadcast_dispatcher.py → fan-out of message.created events
- auto_reply.py           → deferred synthetic replies
- subscriptions.py        → realtime subscription establishment
"""

from rtchat.application.services.authorization_gate import AuthorizationGate
from rtchat.application.services.broadcast_dispatcher import BroadcastDispatcher
from rtchat.application.services.auto_reply import AutoReplyService
from rtchat.application.services.subscriptions import SubscriptionService

__all__ = [
    "AuthorizationGate",
    "BroadcastDispatcher",
    "AutoReplyService",
    "SubscriptionService",
]
