"""
Realtime channel - one websocket per (client, conversation).

    ws://host/cable?conversationId=<uuid>&token=<credential>

The connection is accepted first, then authorized. Any authorization
failure closes it with 1008 (policy violation) and nothing is registered.
Once subscribed, the client only listens; every message appended to the
conversation arrives as a "message.created" event. The subscription is
removed when the socket closes, whichever side closes it.
"""

from logging import getLogger
from typing import Optional

from fastapi import APIRouter, Query, WebSocket, status

from rtchat.application.services.subscriptions import SubscriptionService
from rtchat.config.settings import Config
from rtchat.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    UnauthorizedError,
)
from rtchat.observability.metrics import MetricsErrorType, increment_error
from rtchat.presentation.realtime import WebSocketConnection

logger = getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket(Config.CABLE_PATH)
async def cable(
    websocket: WebSocket,
    conversation_id: Optional[str] = Query(default=None, alias="conversationId"),
    token: Optional[str] = Query(default=None),
):
    await websocket.accept()

    # APP-scoped service, taken from the root container
    subscriptions = await websocket.app.state.dishka_container.get(SubscriptionService)
    connection = WebSocketConnection(websocket)

    try:
        subscribed_to = await subscriptions.open(conversation_id, token, connection)
    except (UnauthorizedError, EntityNotFoundError, AccessDeniedError) as e:
        logger.info("Rejected cable subscription (%s): %s", type(e).__name__, e)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=str(e))
        return
    except Exception as e:
        increment_error(MetricsErrorType.SUBSCRIPTION_FAILED)
        logger.exception("Cable subscription failed: %s", e)
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
        return

    try:
        while True:
            event = await websocket.receive()
            if event["type"] == "websocket.disconnect":
                break
    finally:
        await subscriptions.close(subscribed_to, connection)
