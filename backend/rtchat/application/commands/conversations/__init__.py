"""Conversation commands."""

from .start_conversation import StartConversationCommand, StartConversationHandler
from .append_message import AppendMessageCommand, AppendMessageHandler

__all__ = [
    "StartConversationCommand",
    "StartConversationHandler",
    "AppendMessageCommand",
    "AppendMessageHandler",
]
