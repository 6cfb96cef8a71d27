"""
Start Conversation Command.

Creates a conversation owned by the caller, seeded with exactly one message
authored by the synthetic "AI" actor. Nothing is broadcast: a conversation
that did not exist a moment ago has no subscribers.
"""

import logging
from dataclasses import dataclass

from rtchat.application.common.interfaces import Command, CommandHandler
from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.message import Message
from rtchat.domain.entities.user import User
from rtchat.domain.ports.repositories import ConversationRepository
from rtchat.domain.value_objects.author import Author
from rtchat.observability.metrics import increment_messages_created

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartConversationCommand(Command[Conversation]):
    owner: User
    name: str


class StartConversationHandler(CommandHandler[Conversation]):
    _conversation_repository: ConversationRepository

    def __init__(self, conversation_repository: ConversationRepository, seed_text: str):
        self._conversation_repository = conversation_repository
        self._seed_text = seed_text

    async def execute(self, command: StartConversationCommand) -> Conversation:
        seed_message = Message.create(text=self._seed_text, author=Author.synthetic())
        conversation = await self._conversation_repository.create(
            owner_id=command.owner.id, name=command.name, seed_message=seed_message
        )
        increment_messages_created(synthetic=True)
        logger.info(
            "User %s started conversation %s", command.owner.id, conversation.id
        )
        return conversation
