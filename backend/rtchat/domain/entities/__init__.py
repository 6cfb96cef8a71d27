"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.message import Message
from rtchat.domain.entities.user import User

__all__ = [
    "Conversation",
    "Message",
    "User",
]
