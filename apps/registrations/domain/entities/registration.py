"""
Registration entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..events.registration_submitted import RegistrationSubmitted
from ..value_objects.registration_id import RegistrationId
from ..value_objects.student_details import StudentDetails


@dataclass(eq=False)
class Registration(AggregateRoot):
    """One student's registration for one event, keyed by (event_id, usn)."""
    id: str = field(default='', kw_only=True)
    event_id: str
    details: StudentDetails
    submitted_by: Optional[UUID] = None

    def __post_init__(self):
        if not self.id:
            self.id = RegistrationId.derive(self.event_id, self.details.usn).value

    @classmethod
    def create(
        cls,
        event_id: str,
        details: StudentDetails,
        submitted_by: Optional[UUID] = None,
    ) -> 'Registration':
        """Factory method for a new submission."""
        registration = cls(
            event_id=event_id,
            details=details,
            submitted_by=submitted_by,
        )
        registration.add_domain_event(
            RegistrationSubmitted(
                registration_id=registration.id,
                target_event_id=event_id,
                usn=details.usn,
                submitted_by=submitted_by,
            )
        )
        return registration

    @property
    def registration_id(self) -> str:
        return self.id

    @property
    def usn(self) -> str:
        return self.details.usn
