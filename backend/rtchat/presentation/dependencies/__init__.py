"""FastAPI dependencies shared by the API routers."""

from rtchat.presentation.dependencies.auth import get_current_user
from rtchat.presentation.dependencies.document import json_api_document
from rtchat.presentation.dependencies.media_type import require_json_api

__all__ = ["get_current_user", "json_api_document", "require_json_api"]
