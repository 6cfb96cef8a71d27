"""
Append Message Command - the message pipeline.

Handler steps, each failing fast:
1. Conversation must exist          → EntityNotFoundError
2. Caller must own the conversation → AccessDeniedError
3. Append a new message authored by the caller (under the conversation lock)
4. Return the message to the caller
5. In the background: broadcast it, then schedule the deferred auto reply
   (a failed broadcast still schedules the reply)

Step 5 never delays or fails the caller's response.
"""

import logging
from dataclasses import dataclass
from functools import partial

from rtchat.application.common.interfaces import Command, CommandHandler
from rtchat.application.services.authorization_gate import AuthorizationGate
from rtchat.application.services.auto_reply import AutoReplyService
from rtchat.application.services.broadcast_dispatcher import BroadcastDispatcher
from rtchat.domain.entities.message import Message
from rtchat.domain.entities.user import User
from rtchat.domain.exceptions import EntityNotFoundError
from rtchat.domain.ports.repositories import ConversationRepository
from rtchat.domain.ports.scheduler import TaskScheduler
from rtchat.domain.value_objects.author import Author
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.observability.metrics import (
    MetricsErrorType,
    increment_error,
    increment_messages_created,
)
from rtchat.utils.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppendMessageCommand(Command[Message]):
    user: User
    conversation_id: ConversationId
    text: str


class AppendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        gate: AuthorizationGate,
        locks: KeyedLock,
        dispatcher: BroadcastDispatcher,
        auto_reply: AutoReplyService,
        scheduler: TaskScheduler,
    ):
        self._conversation_repository = conversation_repository
        self._gate = gate
        self._locks = locks
        self._dispatcher = dispatcher
        self._auto_reply = auto_reply
        self._scheduler = scheduler

    async def execute(self, command: AppendMessageCommand) -> Message:
        conversation_id = command.conversation_id

        # 1. Get conversation
        conversation = await self._conversation_repository.get_by_id(conversation_id)
        if not conversation:
            raise EntityNotFoundError(f"Conversation {conversation_id.value} not found")

        # 2. Verify ownership
        self._gate.authorize_ownership(command.user, conversation)

        # 3. Append
        message = Message.create(text=command.text, author=Author.of_user(command.user.id))
        async with self._locks.hold(conversation_id):
            await self._conversation_repository.append_message(conversation_id, message)
        increment_messages_created(synthetic=False)
        logger.info(
            "User %s appended message %s to conversation %s",
            command.user.id,
            message.id,
            conversation_id,
        )

        # 4-5. Background side effects; the caller gets the message right away
        self._scheduler.spawn(
            partial(self._fan_out, conversation_id, message),
            name=f"broadcast:{conversation_id}",
        )

        return message

    async def _fan_out(self, conversation_id: ConversationId, message: Message) -> None:
        try:
            await self._dispatcher.broadcast(conversation_id, message)
        except Exception:
            increment_error(MetricsErrorType.BACKGROUND_TASK_FAILED)
            logger.exception("Broadcast of message %s failed", message.id)
        self._auto_reply.schedule(conversation_id)
