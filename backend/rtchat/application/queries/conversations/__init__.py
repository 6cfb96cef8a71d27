"""Conversation-related queries."""

from rtchat.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from rtchat.application.queries.conversations.get_conversation import (
    GetConversationQuery,
    GetConversationHandler,
)

__all__ = [
    "ListConversationsQuery",
    "ListConversationsHandler",
    "GetConversationQuery",
    "GetConversationHandler",
]
