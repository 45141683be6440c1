"""
User entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Optional

from django.utils import timezone

from shared.domain import AggregateRoot
from ..value_objects.email import Email
from ..value_objects.identity import Identity
from ..value_objects.role import UserRole
from ..events.user_signed_up import UserSignedUp
from ..exceptions import InvalidRoleError


@dataclass(eq=False)
class User(AggregateRoot):
    """User account together with its registration history."""
    email: Email
    username: str
    hashed_password: str
    role: UserRole = UserRole.STUDENT
    is_active: bool = True
    is_staff: bool = False
    last_login: Optional[datetime] = None
    events_registered: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def create(
        cls,
        email: str,
        username: str,
        hashed_password: str,
        role: str = UserRole.STUDENT.value,
    ) -> 'User':
        """Factory method to create a new user."""
        try:
            user_role = UserRole(role)
        except ValueError:
            raise InvalidRoleError(role)

        user = cls(
            email=Email(value=email),
            username=username,
            hashed_password=hashed_password,
            role=user_role,
        )
        user.add_domain_event(
            UserSignedUp(
                user_id=user.id,
                email=user.email.value,
                role=user_role.value,
            )
        )
        return user

    def record_login(self) -> None:
        """Record a successful login."""
        self.last_login = timezone.now()
        self.touch()

    def has_registered_for(self, event_id: str) -> bool:
        return event_id in self.events_registered

    def to_identity(self) -> Identity:
        """Identity handed to use cases acting on behalf of this user."""
        return Identity(uid=self.id, email=self.email.value, role=self.role.value)
