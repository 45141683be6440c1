"""
Event domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class EventNotFoundError(EntityNotFoundError):
    """Raised when an event id does not resolve to an event."""

    def __init__(self, event_id: str):
        super().__init__(entity_name="Event", entity_id=event_id, code="EVENT_NOT_FOUND")
        self.event_id = event_id
