"""
Verified identity value object.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import ValueObject
from .role import UserRole


@dataclass(frozen=True)
class Identity(ValueObject):
    """Verified caller identity handed to use cases explicitly."""
    uid: UUID
    email: str
    role: str

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT.value
