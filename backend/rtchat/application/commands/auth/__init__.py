"""Authentication commands."""

from .authenticate import AuthenticateCommand, AuthenticateHandler, AuthenticateResult

__all__ = [
    "AuthenticateCommand",
    "AuthenticateHandler",
    "AuthenticateResult",
]
