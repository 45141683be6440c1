"""
User DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from ...domain.entities.user import User


@dataclass
class UserCreateDTO:
    """DTO for creating a user."""
    email: str
    username: str
    password: str
    role: Optional[str] = None


@dataclass
class UserDTO:
    """DTO for user output."""
    id: UUID
    email: str
    username: str
    role: str
    is_active: bool
    events_registered: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> 'UserDTO':
        """Create DTO from entity."""
        return cls(
            id=user.id,
            email=user.email.value,
            username=user.username,
            role=user.role.value,
            is_active=user.is_active,
            events_registered=sorted(user.events_registered),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
