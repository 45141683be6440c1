"""
Django ORM implementation of RegistrationRepository.
"""
from typing import List, Optional, Tuple

from django.db import IntegrityError, transaction

from ...domain.entities.registration import Registration
from ...domain.exceptions import DuplicateRegistrationError
from ...domain.repositories.registration_repository import RegistrationRepository
from ...domain.value_objects.student_details import StudentDetails
from ..models.registration_model import RegistrationModel


class DjangoRegistrationRepository(RegistrationRepository):
    """Django ORM based registration repository implementation."""

    def save(self, registration: Registration) -> Tuple[Registration, bool]:
        """
        Full replace keyed by the registration id.

        The lookup also matches event and usn, so a derived-id collision
        between different pairs fails on the primary key instead of
        overwriting another event's record.
        """
        model, created = RegistrationModel.objects.update_or_create(
            id=registration.id,
            event_id=registration.event_id,
            usn=registration.usn,
            defaults=self._to_fields(registration),
        )
        return self._to_entity(model), created

    def create(self, registration: Registration) -> Registration:
        try:
            with transaction.atomic():
                model = RegistrationModel.objects.create(
                    id=registration.id,
                    event_id=registration.event_id,
                    usn=registration.usn,
                    **self._to_fields(registration),
                )
        except IntegrityError:
            if self.exists(registration.id):
                raise DuplicateRegistrationError(registration.id)
            raise
        return self._to_entity(model)

    def find_by_id(self, registration_id: str) -> Optional[Registration]:
        """Find a registration by ID."""
        try:
            model = RegistrationModel.objects.get(id=registration_id)
            return self._to_entity(model)
        except RegistrationModel.DoesNotExist:
            return None

    def exists(self, registration_id: str) -> bool:
        return RegistrationModel.objects.filter(id=registration_id).exists()

    def find_by_event(self, event_id: str, offset: int = 0, limit: int = 20) -> List[Registration]:
        models = (
            RegistrationModel.objects.filter(event_id=event_id)
            .order_by('-created_at')[offset:offset + limit]
        )
        return [self._to_entity(model) for model in models]

    def count_by_event(self, event_id: str) -> int:
        return RegistrationModel.objects.filter(event_id=event_id).count()

    def _to_fields(self, registration: Registration) -> dict:
        return {
            'name': registration.details.name,
            'email': registration.details.email,
            'semester': registration.details.semester,
            'submitted_by_id': registration.submitted_by,
            'created_at': registration.created_at,
        }

    def _to_entity(self, model: RegistrationModel) -> Registration:
        """Convert Django model to domain entity."""
        return Registration(
            id=model.id,
            event_id=model.event_id,
            details=StudentDetails(
                name=model.name,
                usn=model.usn,
                email=model.email,
                semester=model.semester,
            ),
            submitted_by=model.submitted_by_id,
            created_at=model.created_at,
            updated_at=model.created_at,
        )
