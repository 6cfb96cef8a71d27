from rtchat.presentation.realtime.websocket_connection import WebSocketConnection

__all__ = ["WebSocketConnection"]
