"""
Django ORM implementation of UserHistoryRepository.
"""
from typing import Set
from uuid import UUID

from ...domain.exceptions import UserNotFoundError
from ...domain.repositories.user_history_repository import UserHistoryRepository
from ..models.user_model import UserModel, UserEventModel


class DjangoUserHistoryRepository(UserHistoryRepository):
    """Registered-events set backed by a (user, event_id) unique constraint."""

    def add_event(self, user_id: UUID, event_id: str) -> bool:
        if not UserModel.objects.filter(id=user_id).exists():
            raise UserNotFoundError(str(user_id))
        # get_or_create re-reads on IntegrityError, so concurrent adds stay single
        _, created = UserEventModel.objects.get_or_create(user_id=user_id, event_id=event_id)
        return created

    def find_events(self, user_id: UUID) -> Set[str]:
        return set(
            UserEventModel.objects.filter(user_id=user_id).values_list('event_id', flat=True)
        )
