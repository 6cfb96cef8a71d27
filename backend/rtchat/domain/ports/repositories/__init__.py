"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (in-memory, SQL, etc.)

Infrastructure layer provides implementations.
"""

from rtchat.domain.ports.repositories.conversation_repository import ConversationRepository
from rtchat.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "ConversationRepository",
    "UserRepository",
]
