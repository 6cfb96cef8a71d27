"""
Error translation at the HTTP boundary.

Domain exceptions and framework errors are turned into JSON:API error
documents with a stable status code and a machine-readable kind:

    {
        "errors": [
            {"status": "404", "code": "NotFound", "title": "Not Found", "detail": "..."}
        ]
    }

Clients branch on "code"; "detail" is prose.
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from rtchat.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidCredentialsError,
    UnauthorizedError,
)
from rtchat.observability.metrics import MetricsErrorType, increment_error
from rtchat.presentation.responses import JsonApiResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    UNSUPPORTED_MEDIA_TYPE = "UnsupportedMediaType"
    UNAUTHORIZED = "Unauthorized"
    INVALID_CREDENTIALS = "InvalidCredentials"
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    BAD_REQUEST = "BadRequest"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    INTERNAL = "Internal"


_TITLES = {
    ErrorKind.UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.INVALID_CREDENTIALS: "Unauthorized",
    ErrorKind.NOT_FOUND: "Not Found",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.BAD_REQUEST: "Bad Request",
    ErrorKind.METHOD_NOT_ALLOWED: "Method Not Allowed",
    ErrorKind.INTERNAL: "Internal Server Error",
}

# Domain exception → (HTTP status, kind)
_DOMAIN_ERRORS: dict[type[Exception], tuple[int, ErrorKind]] = {
    UnauthorizedError: (status.HTTP_401_UNAUTHORIZED, ErrorKind.UNAUTHORIZED),
    InvalidCredentialsError: (status.HTTP_401_UNAUTHORIZED, ErrorKind.INVALID_CREDENTIALS),
    EntityNotFoundError: (status.HTTP_404_NOT_FOUND, ErrorKind.NOT_FOUND),
    AccessDeniedError: (status.HTTP_403_FORBIDDEN, ErrorKind.FORBIDDEN),
    DomainValidationError: (status.HTTP_400_BAD_REQUEST, ErrorKind.BAD_REQUEST),
}

# Framework HTTP status → kind
_STATUS_KINDS = {
    status.HTTP_400_BAD_REQUEST: ErrorKind.BAD_REQUEST,
    status.HTTP_401_UNAUTHORIZED: ErrorKind.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorKind.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorKind.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorKind.METHOD_NOT_ALLOWED,
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: ErrorKind.UNSUPPORTED_MEDIA_TYPE,
}


class ApiError(Exception):
    """Boundary error raised by presentation-layer dependencies."""

    def __init__(self, status_code: int, kind: ErrorKind, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.kind = kind
        self.detail = detail

    @classmethod
    def unsupported_media_type(cls, detail: str) -> "ApiError":
        return cls(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, ErrorKind.UNSUPPORTED_MEDIA_TYPE, detail)


def error_response(status_code: int, kind: ErrorKind, detail: str) -> JsonApiResponse:
    return JsonApiResponse(
        status_code=status_code,
        content={
            "errors": [
                {
                    "status": str(status_code),
                    "code": kind.value,
                    "title": _TITLES[kind],
                    "detail": detail,
                }
            ]
        },
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Malformed request body"


def register_exception_handlers(app: FastAPI) -> None:
    async def domain_exception_handler(request: Request, exc: Exception):
        for exc_type, (status_code, kind) in _DOMAIN_ERRORS.items():
            if isinstance(exc, exc_type):
                logger.info(f"[{kind.value}] {request.method} {request.url.path}: {exc}")
                return error_response(status_code, kind, str(exc))
        raise exc

    for exc_type in _DOMAIN_ERRORS:
        app.add_exception_handler(exc_type, domain_exception_handler)

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.info(f"[{exc.kind.value}] {request.method} {request.url.path}: {exc.detail}")
        return error_response(exc.status_code, exc.kind, exc.detail)

    # Validation error handler - malformed JSON:API documents
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        detail = _format_validation_errors(exc)
        logger.info(f"[VALIDATION ERROR] {request.method} {request.url.path}: {detail}")
        return error_response(status.HTTP_400_BAD_REQUEST, ErrorKind.BAD_REQUEST, detail)

    # HTTP exception handler - unknown routes, wrong methods
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        kind = _STATUS_KINDS.get(exc.status_code, ErrorKind.INTERNAL)
        return error_response(exc.status_code, kind, str(exc.detail))

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        increment_error(MetricsErrorType.UNHANDLED)
        logger.error(
            f"[GLOBAL ERROR] {type(exc).__name__}: {exc}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorKind.INTERNAL,
            "An unexpected error occurred",
        )
