"""Bearer credential codecs."""

from rtchat.infrastructure.security.opaque_codec import OpaqueCredentialCodec
from rtchat.infrastructure.security.jwt_codec import JwtCredentialCodec

__all__ = ["OpaqueCredentialCodec", "JwtCredentialCodec"]
