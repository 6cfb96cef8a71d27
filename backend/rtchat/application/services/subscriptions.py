"""
Subscription establishment for the realtime channel.

Runs the Authorization Gate for a connecting client, then registers the
connection for the conversation. The transport calls close() when the
connection goes away, whatever the reason.
"""

import logging
from typing import Optional

from rtchat.application.services.authorization_gate import AuthorizationGate
from rtchat.domain.exceptions import EntityNotFoundError, UnauthorizedError
from rtchat.domain.ports.realtime import SubscriberConnection, SubscriptionRegistry
from rtchat.domain.ports.repositories import ConversationRepository
from rtchat.domain.value_objects.conversation_id import ConversationId

logger = logging.getLogger(__name__)


class SubscriptionService:
    def __init__(
        self,
        gate: AuthorizationGate,
        conversation_repository: ConversationRepository,
        registry: SubscriptionRegistry,
    ):
        self._gate = gate
        self._conversation_repository = conversation_repository
        self._registry = registry

    async def open(
        self,
        conversation_id: Optional[str],
        credential: Optional[str],
        connection: SubscriberConnection,
    ) -> ConversationId:
        """
        Authorize and register a connection.

        Raises:
            UnauthorizedError: Missing parameters or unresolvable credential
            EntityNotFoundError: Unknown conversation
            AccessDeniedError: Caller does not own the conversation
        """
        if not conversation_id or not credential:
            raise UnauthorizedError("Missing conversationId or token")

        user = await self._gate.resolve(credential)

        try:
            cid = ConversationId(conversation_id)
        except ValueError as e:
            raise EntityNotFoundError("Conversation not found") from e

        conversation = await self._conversation_repository.get_by_id(cid)
        if conversation is None:
            raise EntityNotFoundError("Conversation not found")
        self._gate.authorize_ownership(user, conversation)

        await self._registry.subscribe(cid, connection)
        logger.info("User %s subscribed to conversation %s", user.id, cid)
        return cid

    async def close(
        self, conversation_id: ConversationId, connection: SubscriberConnection
    ) -> None:
        await self._registry.unsubscribe(conversation_id, connection)
        logger.info("Subscription to conversation %s closed", conversation_id)
