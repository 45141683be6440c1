"""
Registration DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from apps.users.domain.value_objects.identity import Identity
from ...domain.entities.registration import Registration


@dataclass
class RegistrationCreateDTO:
    """DTO for a registration submission; field values are raw request input."""
    event_id: str
    identity: Optional[Identity]
    name: Any = ""
    usn: Any = ""
    email: Any = ""
    semester: Any = ""


@dataclass
class RegistrationDTO:
    """DTO for registration output."""
    registration_id: str
    event_id: str
    name: str
    usn: str
    email: str
    semester: str
    submitted_by: Optional[UUID]
    created_at: datetime
    created: bool = True

    @classmethod
    def from_entity(cls, registration: Registration, created: bool = True) -> 'RegistrationDTO':
        """Create DTO from entity."""
        return cls(
            registration_id=registration.id,
            event_id=registration.event_id,
            name=registration.details.name,
            usn=registration.details.usn,
            email=registration.details.email,
            semester=registration.details.semester,
            submitted_by=registration.submitted_by,
            created_at=registration.created_at,
            created=created,
        )


@dataclass
class ReconcileResultDTO:
    """Counter value before and after reconciliation."""
    event_id: str
    previous: int
    current: int

    @property
    def changed(self) -> bool:
        return self.previous != self.current
