"""
Registration repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..entities.registration import Registration


class RegistrationRepository(ABC):
    """Abstract repository for registration records."""

    @abstractmethod
    def save(self, registration: Registration) -> Tuple[Registration, bool]:
        """
        Write the record as a full replace keyed by its registration id.

        Returns the stored registration and whether it was newly created.
        """
        pass

    @abstractmethod
    def create(self, registration: Registration) -> Registration:
        """Write the record only if absent; raises DuplicateRegistrationError."""
        pass

    @abstractmethod
    def find_by_id(self, registration_id: str) -> Optional[Registration]:
        """Find a registration by its derived id."""
        pass

    @abstractmethod
    def exists(self, registration_id: str) -> bool:
        """Check whether a record with the id exists."""
        pass

    @abstractmethod
    def find_by_event(self, event_id: str, offset: int = 0, limit: int = 20) -> List[Registration]:
        """Registrations for an event, newest first."""
        pass

    @abstractmethod
    def count_by_event(self, event_id: str) -> int:
        """Number of distinct registration records for an event."""
        pass
