"""
Opaque credential codec - the credential is the user's id.

Carries no signature and never expires. Use JwtCredentialCodec wherever a
forgeable credential is not acceptable.
"""

from typing import Optional

from rtchat.domain.ports.credentials import CredentialCodec
from rtchat.domain.value_objects.user_id import UserId


class OpaqueCredentialCodec(CredentialCodec):
    def issue(self, user_id: UserId) -> str:
        return user_id.value

    def resolve(self, credential: str) -> Optional[UserId]:
        try:
            return UserId(credential.strip())
        except ValueError:
            return None
