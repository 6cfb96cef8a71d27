"""
User Entity - A system user.
"""

from dataclasses import dataclass

from rtchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class User:
    id: UserId
    username: str
    password: str  # opaque credential material, never serialized
    email: str

    def __post_init__(self):
        if not self.username or not self.username.strip():
            raise ValueError("Username cannot be empty")
        if "@" not in self.email:
            raise ValueError(f"Invalid user email: {self.email}")
