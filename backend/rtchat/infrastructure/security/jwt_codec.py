"""
JWT credential codec - signed, expiring HS256 tokens.

Claims: sub (user id), iat, exp, iss, aud. Decoding requires all of them and
the same secret/issuer/audience that issued the token.
"""

import logging
import time
from typing import Optional

import jwt

from rtchat.domain.ports.credentials import CredentialCodec
from rtchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class JwtCredentialCodec(CredentialCodec):
    ALGORITHM = "HS256"

    def __init__(self, secret: str, issuer: str, audience: str, ttl_seconds: int):
        if not secret:
            raise ValueError("JWT credentials require SERVICE_AUTH_SECRET to be set")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._ttl_seconds = ttl_seconds

    def issue(self, user_id: UserId) -> str:
        now = int(time.time())
        return jwt.encode(
            {
                "sub": user_id.value,
                "iat": now,
                "exp": now + self._ttl_seconds,
                "iss": self._issuer,
                "aud": self._audience,
            },
            self._secret,
            algorithm=self.ALGORITHM,
        )

    def resolve(self, credential: str) -> Optional[UserId]:
        try:
            claims = jwt.decode(
                credential,
                self._secret,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "aud", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired credential")
            return None
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected invalid credential: {e}")
            return None

        try:
            return UserId(claims["sub"])
        except ValueError:
            return None
