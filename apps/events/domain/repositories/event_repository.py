"""
Event repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..entities.event import Event


class EventRepository(ABC):
    """Abstract repository for events and their registration counter."""

    @abstractmethod
    def find_by_id(self, event_id: str) -> Optional[Event]:
        """Find an event by ID."""
        pass

    @abstractmethod
    def find_by_id_for_update(self, event_id: str) -> Optional[Event]:
        """
        Find an event and lock its row until the surrounding transaction ends.

        Counter increments on the row wait for the lock.
        """
        pass

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Save an event's descriptive fields."""
        pass

    @abstractmethod
    def increment_registrations(self, event_id: str, amount: int = 1) -> None:
        """
        Atomically add to the registration counter.

        Must be a store-side increment, never read-modify-write.
        Raises EventNotFoundError when the event does not exist.
        """
        pass

    @abstractmethod
    def set_registrations(self, event_id: str, count: int) -> None:
        """Overwrite the registration counter."""
        pass
