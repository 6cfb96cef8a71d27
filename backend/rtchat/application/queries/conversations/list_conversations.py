"""List Conversations Query."""

from dataclasses import dataclass
from rtchat.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from rtchat.application.common.interfaces import Query, QueryHandler
from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    owner_id: UserId


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        return await self._conversation_repository.get_by_owner(query.owner_id)
