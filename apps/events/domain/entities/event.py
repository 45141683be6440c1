"""
Event entity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from shared.domain import BaseEntity


def generate_event_id() -> str:
    """Opaque identifier for a newly created event."""
    return uuid4().hex


@dataclass(eq=False)
class Event(BaseEntity):
    """Event as seen by registration: descriptive metadata plus the counter."""
    id: str = field(default_factory=generate_event_id, kw_only=True)
    name: str
    description: str = ""
    venue: str = ""
    starts_at: Optional[datetime] = None
    registrations: int = 0

    def __post_init__(self):
        if self.registrations < 0:
            raise ValueError("Registration count cannot be negative")
