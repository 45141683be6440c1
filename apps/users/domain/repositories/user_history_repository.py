"""
User registration history repository interface.
"""
from abc import ABC, abstractmethod
from typing import Set
from uuid import UUID


class UserHistoryRepository(ABC):
    """Per-user set of event ids the user registered for."""

    @abstractmethod
    def add_event(self, user_id: UUID, event_id: str) -> bool:
        """
        Add an event id to the user's set if absent.

        Returns True when the id was added, False when it was already present.
        Raises UserNotFoundError for an unknown user.
        """
        pass

    @abstractmethod
    def find_events(self, user_id: UUID) -> Set[str]:
        """Return the event ids the user registered for."""
        pass
