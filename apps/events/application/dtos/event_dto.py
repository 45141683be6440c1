"""
Event DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...domain.entities.event import Event


@dataclass
class EventDTO:
    """DTO for event output."""
    id: str
    name: str
    description: str
    venue: str
    starts_at: Optional[datetime]
    registrations: int

    @classmethod
    def from_entity(cls, event: Event) -> 'EventDTO':
        return cls(
            id=event.id,
            name=event.name,
            description=event.description,
            venue=event.venue,
            starts_at=event.starts_at,
            registrations=event.registrations,
        )
