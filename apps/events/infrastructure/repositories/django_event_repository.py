"""
Django ORM implementation of EventRepository.
"""
from typing import Optional

from django.db import transaction
from django.db.models import F

from ...domain.entities.event import Event
from ...domain.exceptions import EventNotFoundError
from ...domain.repositories.event_repository import EventRepository
from ..models.event_model import EventModel


class DjangoEventRepository(EventRepository):
    """Django ORM based event repository implementation."""

    def find_by_id(self, event_id: str) -> Optional[Event]:
        """Find an event by ID."""
        try:
            model = EventModel.objects.get(id=event_id)
            return self._to_entity(model)
        except EventModel.DoesNotExist:
            return None

    def find_by_id_for_update(self, event_id: str) -> Optional[Event]:
        try:
            model = EventModel.objects.select_for_update().get(id=event_id)
        except EventModel.DoesNotExist:
            return None
        return self._to_entity(model)

    def save(self, event: Event) -> Event:
        """Save descriptive fields; the counter is left to increment/set."""
        with transaction.atomic():
            model, created = EventModel.objects.update_or_create(
                id=event.id,
                defaults={
                    'name': event.name,
                    'description': event.description,
                    'venue': event.venue,
                    'starts_at': event.starts_at,
                },
                create_defaults={
                    'name': event.name,
                    'description': event.description,
                    'venue': event.venue,
                    'starts_at': event.starts_at,
                    'registrations': event.registrations,
                },
            )
            return self._to_entity(model)

    def increment_registrations(self, event_id: str, amount: int = 1) -> None:
        """UPDATE events SET registrations = registrations + amount."""
        updated = EventModel.objects.filter(id=event_id).update(
            registrations=F('registrations') + amount
        )
        if not updated:
            raise EventNotFoundError(event_id)

    def set_registrations(self, event_id: str, count: int) -> None:
        updated = EventModel.objects.filter(id=event_id).update(registrations=count)
        if not updated:
            raise EventNotFoundError(event_id)

    def _to_entity(self, model: EventModel) -> Event:
        """Convert Django model to domain entity."""
        return Event(
            id=model.id,
            name=model.name,
            description=model.description,
            venue=model.venue,
            starts_at=model.starts_at,
            registrations=model.registrations,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
