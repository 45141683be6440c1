"""
Tests for the registered-events history store.
"""
from uuid import uuid4

import pytest

from apps.users.domain.exceptions import UserNotFoundError
from apps.users.infrastructure.models import UserEventModel
from apps.users.infrastructure.repositories import DjangoUserHistoryRepository


@pytest.mark.django_db
class TestDjangoUserHistoryRepository:

    def test_add_is_idempotent(self, student_user):
        repository = DjangoUserHistoryRepository()

        assert repository.add_event(student_user.id, 'evt42') is True
        assert repository.add_event(student_user.id, 'evt42') is False

        assert UserEventModel.objects.filter(user=student_user).count() == 1

    def test_find_events(self, student_user):
        repository = DjangoUserHistoryRepository()
        repository.add_event(student_user.id, 'evt42')
        repository.add_event(student_user.id, 'evt43')

        assert repository.find_events(student_user.id) == {'evt42', 'evt43'}

    def test_unknown_user(self, db):
        with pytest.raises(UserNotFoundError):
            DjangoUserHistoryRepository().add_event(uuid4(), 'evt42')
