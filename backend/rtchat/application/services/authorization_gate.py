"""
Authorization Gate - who is calling, and may they touch this conversation.

The credential format is owned by the CredentialCodec; the gate only
guarantees that resolve() either returns a known user or raises
UnauthorizedError.
"""

import logging
from typing import Optional

from rtchat.domain.entities.conversation import Conversation
from rtchat.domain.entities.user import User
from rtchat.domain.exceptions import (
    AccessDeniedError,
    InvalidCredentialsError,
    UnauthorizedError,
)
from rtchat.domain.ports.credentials import CredentialCodec
from rtchat.domain.ports.repositories import UserRepository

logger = logging.getLogger(__name__)


class AuthorizationGate:
    def __init__(self, user_repository: UserRepository, credential_codec: CredentialCodec):
        self._user_repository = user_repository
        self._credential_codec = credential_codec

    async def authenticate(self, username: str, password: str) -> User:
        """
        Find the user with exactly this username and password.

        Raises:
            InvalidCredentialsError: If no user matches
        """
        user = await self._user_repository.get_by_credentials(username, password)
        if user is None:
            logger.info("Authentication failed for username %r", username)
            raise InvalidCredentialsError()
        return user

    def issue_credential(self, user: User) -> str:
        return self._credential_codec.issue(user.id)

    async def resolve(self, credential: Optional[str]) -> User:
        """
        Resolve a bearer credential to a user.

        Raises:
            UnauthorizedError: If the credential is missing or unknown
        """
        if not credential or not credential.strip():
            raise UnauthorizedError("No token provided")

        user_id = self._credential_codec.resolve(credential)
        if user_id is None:
            raise UnauthorizedError("Invalid token")

        user = await self._user_repository.get_by_id(user_id)
        if user is None:
            raise UnauthorizedError("Invalid token")
        return user

    def authorize_ownership(self, user: User, conversation: Conversation) -> None:
        """Raises AccessDeniedError unless user owns the conversation."""
        if not conversation.is_owned_by(user.id):
            raise AccessDeniedError()
