"""Adapts a Starlette WebSocket to the SubscriberConnection port."""

from starlette.websockets import WebSocket, WebSocketState

from rtchat.domain.ports.realtime import SubscriberConnection


class WebSocketConnection(SubscriberConnection):
    def __init__(self, websocket: WebSocket):
        self._websocket = websocket

    @property
    def is_open(self) -> bool:
        return (
            self._websocket.client_state == WebSocketState.CONNECTED
            and self._websocket.application_state == WebSocketState.CONNECTED
        )

    async def send_text(self, payload: str) -> None:
        await self._websocket.send_text(payload)
