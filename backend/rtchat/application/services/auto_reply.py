"""
Deferred auto reply.

After a human message lands, a timer is started for the conversation. When it
fires, the conversation's last message decides what happens:
- last message already authored by "AI" → nothing (a burst of human messages
  yields a single reply; stale timers no-op)
- otherwise → append the fixed synthetic reply and broadcast it

The read-then-append runs under the conversation's mutation lock so it cannot
interleave with a concurrent human append. Failures are logged and counted,
never raised to the request that scheduled the reply.

Cancellation policy:
- cancel_pending=False (default): every timer fires; stale ones no-op.
- cancel_pending=True: a newer schedule() for the same conversation cancels
  the pending timer, so the reply is measured from the latest message. A
  timer that has already fired runs to completion.
"""

import itertools
import logging
from functools import partial
from typing import Optional

from rtchat.application.services.broadcast_dispatcher import BroadcastDispatcher
from rtchat.domain.entities.message import Message
from rtchat.domain.exceptions import EntityNotFoundError
from rtchat.domain.ports.repositories import ConversationRepository
from rtchat.domain.ports.scheduler import TaskHandle, TaskScheduler
from rtchat.domain.value_objects.author import Author
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.observability.metrics import (
    AutoReplyOutcome,
    MetricsErrorType,
    increment_auto_reply,
    increment_error,
    increment_messages_created,
)
from rtchat.utils.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)


class AutoReplyService:
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        dispatcher: BroadcastDispatcher,
        scheduler: TaskScheduler,
        locks: KeyedLock,
        delay: float,
        reply_text: str,
        cancel_pending: bool = False,
    ):
        self._conversation_repository = conversation_repository
        self._dispatcher = dispatcher
        self._scheduler = scheduler
        self._locks = locks
        self._delay = delay
        self._reply_text = reply_text
        self._cancel_pending = cancel_pending
        self._pending: dict[ConversationId, tuple[int, TaskHandle]] = {}
        self._tickets = itertools.count()

    def schedule(
        self, conversation_id: ConversationId, delay: Optional[float] = None
    ) -> TaskHandle:
        if self._cancel_pending:
            self.cancel(conversation_id)

        ticket = next(self._tickets)
        handle = self._scheduler.schedule(
            self._delay if delay is None else delay,
            partial(self._fire, conversation_id, ticket),
            name=f"auto-reply:{conversation_id}",
        )
        self._pending[conversation_id] = (ticket, handle)
        return handle

    def cancel(self, conversation_id: ConversationId) -> bool:
        """Cancel the latest pending reply for the conversation, if any."""
        entry = self._pending.pop(conversation_id, None)
        if entry is None:
            return False
        _, handle = entry
        cancelled = handle.cancel()
        if cancelled:
            logger.debug("Cancelled pending auto reply for %s", conversation_id)
        return cancelled

    async def reply_if_needed(self, conversation_id: ConversationId) -> Optional[Message]:
        """
        Append and broadcast the synthetic reply unless the last message is
        already synthetic.

        Raises:
            EntityNotFoundError: If the conversation no longer exists
        """
        async with self._locks.hold(conversation_id):
            conversation = await self._conversation_repository.get_by_id(conversation_id)
            if conversation is None:
                raise EntityNotFoundError(
                    f"Conversation {conversation_id.value} not found"
                )

            last_message = conversation.last_message
            if last_message is not None and last_message.is_synthetic:
                increment_auto_reply(AutoReplyOutcome.SKIPPED)
                logger.debug("Auto reply skipped for %s: last message is AI", conversation_id)
                return None

            reply = Message.create(text=self._reply_text, author=Author.synthetic())
            await self._conversation_repository.append_message(conversation_id, reply)

        increment_auto_reply(AutoReplyOutcome.APPENDED)
        increment_messages_created(synthetic=True)
        logger.info("Auto reply %s appended to conversation %s", reply.id, conversation_id)

        await self._dispatcher.broadcast(conversation_id, reply)
        return reply

    async def _fire(self, conversation_id: ConversationId, ticket: int) -> None:
        # An elapsed timer is no longer cancellable, so its reply reaches the broadcast
        entry = self._pending.get(conversation_id)
        if entry is not None and entry[0] == ticket:
            del self._pending[conversation_id]

        try:
            await self.reply_if_needed(conversation_id)
        except Exception:
            increment_auto_reply(AutoReplyOutcome.FAILED)
            increment_error(MetricsErrorType.AUTO_REPLY_FAILED)
            logger.exception("Auto reply for conversation %s failed", conversation_id)
