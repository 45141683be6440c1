"""
User signed up domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class UserSignedUp(DomainEvent):
    """Event raised when a new account is created."""
    user_id: UUID
    email: str
    role: str
