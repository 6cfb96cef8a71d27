"""
Authentication Dependency for FastAPI.

Guidelines:
- Extracts the bearer credential from the Authorization header
  (raw token or "Bearer <token>")
- Resolves it through the AuthorizationGate
- Returns the User entity for use in route handlers
- UnauthorizedError (→ 401) if missing or invalid
"""

from typing import Optional

from fastapi import Header, Request

from rtchat.application.services.authorization_gate import AuthorizationGate
from rtchat.domain.entities.user import User


def extract_credential(authorization: Optional[str]) -> Optional[str]:
    if authorization is None:
        return None
    scheme, _, rest = authorization.strip().partition(" ")
    if rest and scheme.lower() == "bearer":
        return rest.strip()
    return authorization.strip()


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> User:
    """
    Resolve the calling user.

    Raises:
        UnauthorizedError if the credential is missing or does not resolve
    """
    gate = await request.state.dishka_container.get(AuthorizationGate)
    return await gate.resolve(extract_credential(authorization))
