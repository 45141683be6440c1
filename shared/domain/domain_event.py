"""
Domain event base class.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from django.utils import timezone


@dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events."""
    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=timezone.now, kw_only=True)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__

    def payload(self) -> dict:
        """Event fields without the envelope."""
        data = asdict(self)
        data.pop('event_id')
        data.pop('occurred_at')
        return data
