"""
GetConversation Query - Get one conversation with its messages.
"""

from dataclasses import dataclass

from rtchat.application.common.interfaces import Query, QueryHandler
from rtchat.application.services.authorization_gate import AuthorizationGate
from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.user import User
from rtchat.domain.exceptions import EntityNotFoundError
from rtchat.domain.ports.repositories import ConversationRepository
from rtchat.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class GetConversationQuery(Query[Conversation]):
    conversation_id: ConversationId
    user: User


class GetConversationHandler(QueryHandler[Conversation]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        gate: AuthorizationGate,
    ):
        self._conversation_repository = conversation_repository
        self._gate = gate

    async def execute(self, query: GetConversationQuery) -> Conversation:
        """
        Raises:
            EntityNotFoundError: If conversation doesn't exist
            AccessDeniedError: If user doesn't own the conversation
        """
        conversation = await self._conversation_repository.get_by_id(query.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {query.conversation_id.value} not found"
            )

        self._gate.authorize_ownership(query.user, conversation)
        return conversation
