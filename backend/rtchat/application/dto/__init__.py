"""
DTOs - Data Transfer Objects

JSON:API resource shapes for transferring data across the boundary:
- message.py      → MessageResource, MessageCreatedEvent
- conversation.py → ConversationResource

Note: These are different from domain entities.
DTOs are for API/wire input/output, entities are for business logic.
"""

from rtchat.application.dto.message import (
    MessageAttributes,
    MessageResource,
    MessageCreatedEvent,
    MESSAGE_CREATED_EVENT,
)
from rtchat.application.dto.conversation import (
    ConversationAttributes,
    ConversationResource,
    MessageRecord,
)

__all__ = [
    "MessageAttributes",
    "MessageResource",
    "MessageCreatedEvent",
    "MESSAGE_CREATED_EVENT",
    "ConversationAttributes",
    "ConversationResource",
    "MessageRecord",
]
