"""
Registration submitted domain event.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class RegistrationSubmitted(DomainEvent):
    """Event raised when a registration record is written for an event."""
    registration_id: str
    target_event_id: str
    usn: str
    submitted_by: Optional[UUID]
