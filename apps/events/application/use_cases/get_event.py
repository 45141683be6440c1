"""
Get event use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import EventNotFoundError
from ...domain.repositories.event_repository import EventRepository
from ..dtos.event_dto import EventDTO


@dataclass
class GetEventUseCase(UseCase[str, EventDTO]):
    """Single-attempt read of an event by id."""

    event_repository: EventRepository

    def execute(self, input_dto: str) -> UseCaseResult[EventDTO]:
        event = self.event_repository.find_by_id(input_dto)
        if event is None:
            raise EventNotFoundError(input_dto)
        return UseCaseResult.ok(EventDTO.from_entity(event))
