"""
Author Value Object - Who wrote a message.

An author is either a user (identified by the user's UUID) or the synthetic
"AI" actor used for seed messages and automated replies.
"""

from __future__ import annotations
from dataclasses import dataclass

from rtchat.domain.value_objects.user_id import UserId

AI_AUTHOR = "AI"


@dataclass(frozen=True)
class Author:
    value: str  # user id string or the literal "AI"

    def __post_init__(self):
        if not self.value:
            raise ValueError("Author cannot be empty")
        if self.value != AI_AUTHOR:
            UserId(self.value)  # raises ValueError if not a user id

    @classmethod
    def synthetic(cls) -> Author:
        return cls(AI_AUTHOR)

    @classmethod
    def of_user(cls, user_id: UserId) -> Author:
        return cls(user_id.value)

    @property
    def is_synthetic(self) -> bool:
        return self.value == AI_AUTHOR

    def __str__(self) -> str:
        return self.value
