"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from rtchat.domain.exceptions.entity_not_found import EntityNotFoundError
from rtchat.domain.exceptions.access_denied import AccessDeniedError
from rtchat.domain.exceptions.unauthorized import UnauthorizedError
from rtchat.domain.exceptions.invalid_credentials import InvalidCredentialsError
from rtchat.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "UnauthorizedError",
    "InvalidCredentialsError",
    "DomainValidationError",
]
