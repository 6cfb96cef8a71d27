"""
API Routers - FastAPI endpoint definitions.
"""

from rtchat.presentation.api.auth import router as auth_router
from rtchat.presentation.api.cable import router as cable_router
from rtchat.presentation.api.conversations import router as conversations_router
from rtchat.presentation.api.metrics import router as metrics_router

__all__ = [
    "auth_router",
    "cable_router",
    "conversations_router",
    "metrics_router",
]
