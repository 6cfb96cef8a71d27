"""
Content negotiation for the JSON:API surface.

- Requests carrying a body must declare Content-Type: application/vnd.api+json
- Accept, when sent, must admit application/vnd.api+json

Anything else is rejected with 415 before authentication runs.
"""

from fastapi import Request

from rtchat.config.settings import Config
from rtchat.presentation.errors import ApiError

_BODY_METHODS = {"POST", "PUT", "PATCH"}


def _bare_media_type(value: str) -> str:
    return value.split(";", 1)[0].strip().lower()


def accepts(accept_header: str, media_type: str) -> bool:
    """True if any media range in the Accept header matches media_type."""
    main_type = media_type.split("/", 1)[0]
    for media_range in accept_header.split(","):
        candidate = _bare_media_type(media_range)
        if candidate in {media_type, "*/*", f"{main_type}/*"}:
            return True
    return False


async def require_json_api(request: Request) -> None:
    media_type = Config.API_MEDIA_TYPE

    if request.method in _BODY_METHODS:
        content_type = request.headers.get("content-type", "")
        if _bare_media_type(content_type) != media_type:
            raise ApiError.unsupported_media_type(
                f"Unsupported Content-Type header: {content_type or '(missing)'}"
            )

    accept = request.headers.get("accept")
    if accept and not accepts(accept, media_type):
        raise ApiError.unsupported_media_type(f"Unsupported Accept header: {accept}")
