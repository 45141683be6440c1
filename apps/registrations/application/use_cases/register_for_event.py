"""
Register for event use case.

One submission performs three writes in a fixed order:

1. record  - write the registration keyed by ``<event_id>_<usn>``
2. counter - atomically increment the event's ``registrations``
3. history - add the event id to the user's ``events_registered`` set

A failing step stops the pipeline. Earlier steps stay committed unless the
use case runs with ``atomic=True``, in which case the database transaction
rolls all of them back.
"""
import logging
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Callable, List, Tuple

from django.db import transaction

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import DomainException
from apps.events.domain.exceptions import EventNotFoundError
from apps.events.domain.repositories.event_repository import EventRepository
from apps.users.domain.repositories.user_history_repository import UserHistoryRepository
from ...domain.entities.registration import Registration
from ...domain.exceptions import (
    DuplicateRegistrationError,
    RegistrationPartialFailureError,
    UnauthorizedRegistrationError,
)
from ...domain.repositories.registration_repository import RegistrationRepository
from ...domain.value_objects.policies import DuplicatePolicy, RegistrationStep
from ...domain.value_objects.student_details import StudentDetails
from ..dtos.registration_dto import RegistrationCreateDTO, RegistrationDTO

logger = logging.getLogger(__name__)


@dataclass
class RegisterForEventUseCase(UseCase[RegistrationCreateDTO, RegistrationDTO]):
    """Use case for a student's event registration."""

    event_repository: EventRepository
    registration_repository: RegistrationRepository
    user_history_repository: UserHistoryRepository
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE
    atomic: bool = False

    def execute(self, input_dto: RegistrationCreateDTO) -> UseCaseResult[RegistrationDTO]:
        try:
            registration = self._prepare(input_dto)
        except DomainException as exc:
            logger.info(
                f"Registration for event {input_dto.event_id} rejected: {exc.code} {exc.message}"
            )
            return UseCaseResult.from_exception(exc)

        try:
            with self._write_scope():
                created = self._write(registration)
        except DuplicateRegistrationError as exc:
            logger.info(f"Registration {registration.id} rejected as duplicate")
            return UseCaseResult.from_exception(exc)
        except RegistrationPartialFailureError as exc:
            logger.error(
                f"Registration {registration.id} failed at step '{exc.step}' "
                f"(completed: {exc.completed_steps}, rolled back: {exc.rolled_back})",
                exc_info=exc.cause,
            )
            return UseCaseResult.from_exception(exc)

        for event in registration.clear_domain_events():
            logger.info(f"{event.event_type}: {event.payload()}")

        return UseCaseResult.ok(RegistrationDTO.from_entity(registration, created=created))

    def _prepare(self, input_dto: RegistrationCreateDTO) -> Registration:
        """Check preconditions in order; nothing is written here."""
        identity = input_dto.identity
        if identity is None:
            raise UnauthorizedRegistrationError('unauthenticated')
        if not identity.is_student:
            raise UnauthorizedRegistrationError('forbidden_role')

        if self.event_repository.find_by_id(input_dto.event_id) is None:
            raise EventNotFoundError(input_dto.event_id)

        details = StudentDetails(
            name=input_dto.name,
            usn=input_dto.usn,
            email=input_dto.email,
            semester=input_dto.semester,
        )
        registration = Registration.create(
            event_id=input_dto.event_id,
            details=details,
            submitted_by=identity.uid,
        )

        if (
            self.duplicate_policy == DuplicatePolicy.REJECT
            and self.registration_repository.exists(registration.id)
        ):
            raise DuplicateRegistrationError(registration.id)

        return registration

    def _write_scope(self):
        if self.atomic:
            return transaction.atomic()
        return nullcontext()

    def _write(self, registration: Registration) -> bool:
        """Run the write steps in order; returns whether the record is new."""
        outcome = {'created': True}

        def write_record():
            if self.duplicate_policy == DuplicatePolicy.REJECT:
                self.registration_repository.create(registration)
            else:
                _, outcome['created'] = self.registration_repository.save(registration)

        steps: List[Tuple[RegistrationStep, Callable[[], object]]] = [
            (RegistrationStep.RECORD, write_record),
            (
                RegistrationStep.COUNTER,
                lambda: self.event_repository.increment_registrations(registration.event_id),
            ),
            (
                RegistrationStep.HISTORY,
                lambda: self.user_history_repository.add_event(
                    registration.submitted_by, registration.event_id
                ),
            ),
        ]

        completed: List[str] = []
        for step, action in steps:
            try:
                action()
            except DuplicateRegistrationError:
                raise
            except Exception as exc:
                raise RegistrationPartialFailureError(
                    step=step.value,
                    cause=exc,
                    completed_steps=completed,
                    rolled_back=self.atomic,
                ) from exc
            completed.append(step.value)

        return outcome['created']
