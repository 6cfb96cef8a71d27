"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Think of it as a contract:
- Domain says: "I need to store conversations"
- Infrastructure implements: "I'll keep them in memory"

Subfolders:
- repositories/      → Data persistence interfaces
- (root files)       → Other external service interfaces
    - realtime.py    → subscriber connections and the subscription registry
    - scheduler.py   → deferred / background task execution
    - credentials.py → bearer credential issue and resolve
"""

from rtchat.domain.ports.realtime import SubscriberConnection, SubscriptionRegistry
from rtchat.domain.ports.scheduler import TaskHandle, TaskScheduler
from rtchat.domain.ports.credentials import CredentialCodec

__all__ = [
    "SubscriberConnection",
    "SubscriptionRegistry",
    "TaskHandle",
    "TaskScheduler",
    "CredentialCodec",
]
