"""
In-memory repositories with failure injection.
"""
from typing import Dict, List, Optional, Set, Tuple
from uuid import UUID

from apps.events.domain.entities.event import Event
from apps.events.domain.exceptions import EventNotFoundError
from apps.events.domain.repositories.event_repository import EventRepository
from apps.registrations.domain.entities.registration import Registration
from apps.registrations.domain.exceptions import DuplicateRegistrationError
from apps.registrations.domain.repositories.registration_repository import RegistrationRepository
from apps.users.domain.repositories.user_history_repository import UserHistoryRepository


class StoreUnavailable(Exception):
    """Injected store failure."""


class InMemoryEventRepository(EventRepository):

    def __init__(self, events: Optional[List[Event]] = None):
        self.events: Dict[str, Event] = {event.id: event for event in events or []}
        self.fail_increment = False
        self.locked: List[str] = []

    def find_by_id(self, event_id: str) -> Optional[Event]:
        return self.events.get(event_id)

    def find_by_id_for_update(self, event_id: str) -> Optional[Event]:
        self.locked.append(event_id)
        return self.events.get(event_id)

    def save(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def increment_registrations(self, event_id: str, amount: int = 1) -> None:
        if self.fail_increment:
            raise StoreUnavailable("counter store unavailable")
        if event_id not in self.events:
            raise EventNotFoundError(event_id)
        self.events[event_id].registrations += amount

    def set_registrations(self, event_id: str, count: int) -> None:
        if event_id not in self.events:
            raise EventNotFoundError(event_id)
        self.events[event_id].registrations = count

    def counter(self, event_id: str) -> int:
        return self.events[event_id].registrations


class InMemoryRegistrationRepository(RegistrationRepository):

    def __init__(self):
        self.records: Dict[str, Registration] = {}
        self.fail_write = False

    def save(self, registration: Registration) -> Tuple[Registration, bool]:
        if self.fail_write:
            raise StoreUnavailable("registration store unavailable")
        created = registration.id not in self.records
        self.records[registration.id] = registration
        return registration, created

    def create(self, registration: Registration) -> Registration:
        if self.fail_write:
            raise StoreUnavailable("registration store unavailable")
        if registration.id in self.records:
            raise DuplicateRegistrationError(registration.id)
        self.records[registration.id] = registration
        return registration

    def find_by_id(self, registration_id: str) -> Optional[Registration]:
        return self.records.get(registration_id)

    def exists(self, registration_id: str) -> bool:
        return registration_id in self.records

    def find_by_event(self, event_id: str, offset: int = 0, limit: int = 20) -> List[Registration]:
        matches = [r for r in self.records.values() if r.event_id == event_id]
        matches.sort(key=lambda r: r.created_at, reverse=True)
        return matches[offset:offset + limit]

    def count_by_event(self, event_id: str) -> int:
        return sum(1 for r in self.records.values() if r.event_id == event_id)


class InMemoryUserHistoryRepository(UserHistoryRepository):

    def __init__(self):
        self.history: Dict[UUID, Set[str]] = {}
        self.fail_add = False

    def add_event(self, user_id: UUID, event_id: str) -> bool:
        if self.fail_add:
            raise StoreUnavailable("user store unavailable")
        events = self.history.setdefault(user_id, set())
        if event_id in events:
            return False
        events.add(event_id)
        return True

    def find_events(self, user_id: UUID) -> Set[str]:
        return set(self.history.get(user_id, set()))
