"""
Reconcile registration count use case.
"""
import logging
from dataclasses import dataclass

from django.db import transaction

from shared.application import UseCase, UseCaseResult
from apps.events.domain.exceptions import EventNotFoundError
from apps.events.domain.repositories.event_repository import EventRepository
from ...domain.repositories.registration_repository import RegistrationRepository
from ..dtos.registration_dto import ReconcileResultDTO

logger = logging.getLogger(__name__)


@dataclass
class ReconcileRegistrationCountUseCase(UseCase[str, ReconcileResultDTO]):
    """
    Reset an event's counter to the number of distinct registration records.

    The event row stays locked from before the count until the new value is
    committed, so an increment racing the repair lands on top of it.
    """

    event_repository: EventRepository
    registration_repository: RegistrationRepository

    @transaction.atomic
    def execute(self, input_dto: str) -> UseCaseResult[ReconcileResultDTO]:
        event = self.event_repository.find_by_id_for_update(input_dto)
        if event is None:
            raise EventNotFoundError(input_dto)

        count = self.registration_repository.count_by_event(input_dto)
        if count != event.registrations:
            self.event_repository.set_registrations(input_dto, count)
            logger.warning(
                f"Event {input_dto} counter corrected: {event.registrations} -> {count}"
            )

        return UseCaseResult.ok(
            ReconcileResultDTO(event_id=input_dto, previous=event.registrations, current=count)
        )
