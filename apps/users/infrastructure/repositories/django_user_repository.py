"""
Django ORM implementation of UserRepository.
"""
from typing import Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.user import User
from ...domain.repositories.user_repository import UserRepository
from ...domain.value_objects.email import Email
from ...domain.value_objects.role import UserRole
from ..models.user_model import UserModel


class DjangoUserRepository(UserRepository):
    """Django ORM based user repository implementation."""

    def save(self, user: User) -> User:
        """Save a user entity."""
        with transaction.atomic():
            model, created = UserModel.objects.update_or_create(
                id=user.id,
                defaults={
                    'email': user.email.value,
                    'username': user.username,
                    'password': user.hashed_password,
                    'role': user.role.value,
                    'is_active': user.is_active,
                    'is_staff': user.is_staff,
                    'last_login': user.last_login,
                }
            )
            return self._to_entity(model)

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by ID."""
        try:
            model = UserModel.objects.get(id=user_id)
            return self._to_entity(model)
        except UserModel.DoesNotExist:
            return None

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        try:
            model = UserModel.objects.get(email__iexact=email)
            return self._to_entity(model)
        except UserModel.DoesNotExist:
            return None

    def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""
        return UserModel.objects.filter(email__iexact=email).exists()

    def exists_by_username(self, username: str) -> bool:
        """Check if a user exists with the given username."""
        return UserModel.objects.filter(username=username).exists()

    def _to_entity(self, model: UserModel) -> User:
        """Convert Django model to domain entity."""
        return User(
            id=model.id,
            email=Email(value=model.email),
            username=model.username,
            hashed_password=model.password,
            role=UserRole(model.role),
            is_active=model.is_active,
            is_staff=model.is_staff,
            last_login=model.last_login,
            events_registered=frozenset(model.events_registered),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
