"""
Conversations API Router - JSON:API endpoints for conversations and messages.

Guidelines:
- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Delegates business logic to Application layer handlers
- Domain exceptions propagate to the handlers in presentation/errors.py

Check order for every endpoint (first failure wins):
  media type (415) → credential (401) → body (400) → existence (404) → ownership (403)

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository
                                       ↓
  HTTP Response ← Router ← Resource ←
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from rtchat.application.commands.conversations import (
    AppendMessageCommand,
    AppendMessageHandler,
    StartConversationCommand,
    StartConversationHandler,
)
from rtchat.application.dto import ConversationResource, MessageResource
from rtchat.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from rtchat.domain.entities.user import User
from rtchat.domain.exceptions import EntityNotFoundError
from rtchat.domain.value_objects.conversation_id import ConversationId
from rtchat.presentation.dependencies import (
    get_current_user,
    json_api_document,
    require_json_api,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class ConversationAttributesInput(BaseModel):
    name: str = Field(min_length=1)


class ConversationData(BaseModel):
    type: str = "conversations"
    attributes: ConversationAttributesInput


class CreateConversationRequest(BaseModel):
    """
    Request body for starting a conversation.

    {"data": {"type": "conversations", "attributes": {"name": "..."}}}
    """

    data: ConversationData


class MessageAttributesInput(BaseModel):
    text: str = Field(min_length=1)


class MessageData(BaseModel):
    type: str = "messages"
    attributes: MessageAttributesInput


class AppendMessageRequest(BaseModel):
    """
    Request body for posting a message.

    {"data": {"type": "messages", "attributes": {"text": "..."}}}
    """

    data: MessageData


class ConversationDocument(BaseModel):
    data: ConversationResource


class ConversationListDocument(BaseModel):
    data: list[ConversationResource]


class MessageDocument(BaseModel):
    data: MessageResource


def parse_conversation_id(conversation_id: str) -> ConversationId:
    """Path ids that are not UUIDs cannot name a conversation."""
    try:
        return ConversationId(conversation_id)
    except ValueError as e:
        raise EntityNotFoundError(f"Conversation {conversation_id} not found") from e


# ==================== ROUTER ====================

router = APIRouter(
    prefix="/conversations",
    tags=["conversations"],
    dependencies=[Depends(require_json_api)],
)


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=ConversationListDocument,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: User = Depends(get_current_user),
):
    """List the caller's conversations, oldest first."""
    conversations = await handler.execute(ListConversationsQuery(owner_id=current_user.id))
    return ConversationListDocument(
        data=[ConversationResource.from_entity(c) for c in conversations]
    )


@router.get(
    "/{conversation_id}",
    response_model=ConversationDocument,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_conversation(
    conversation_id: str,
    handler: FromDishka[GetConversationHandler],
    current_user: User = Depends(get_current_user),
):
    """Get one conversation with its full message history."""
    query = GetConversationQuery(
        conversation_id=parse_conversation_id(conversation_id),
        user=current_user,
    )
    conversation = await handler.execute(query)
    return ConversationDocument(data=ConversationResource.from_entity(conversation))


@router.post(
    "",
    response_model=ConversationDocument,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def start_conversation(
    handler: FromDishka[StartConversationHandler],
    current_user: User = Depends(get_current_user),
    document: CreateConversationRequest = Depends(
        json_api_document(CreateConversationRequest)
    ),
):
    """Start a conversation seeded with the assistant's greeting."""
    command = StartConversationCommand(
        owner=current_user,
        name=document.data.attributes.name,
    )
    conversation = await handler.execute(command)
    return ConversationDocument(data=ConversationResource.from_entity(conversation))


@router.post(
    "/{conversation_id}",
    response_model=MessageDocument,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def append_message(
    conversation_id: str,
    handler: FromDishka[AppendMessageHandler],
    current_user: User = Depends(get_current_user),
    document: AppendMessageRequest = Depends(json_api_document(AppendMessageRequest)),
):
    """
    Post a message to a conversation.

    Subscribers receive it, and a deferred auto reply is scheduled,
    after this response is produced.
    """
    command = AppendMessageCommand(
        user=current_user,
        conversation_id=parse_conversation_id(conversation_id),
        text=document.data.attributes.text,
    )
    message = await handler.execute(command)
    return MessageDocument(data=MessageResource.from_entity(message))
