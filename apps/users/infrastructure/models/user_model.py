"""
User Django ORM models.
"""
import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models

from ...domain.value_objects.role import UserRole


class UserManager(BaseUserManager):
    """Manager for email-based user accounts."""

    use_in_migrations = True

    def create_user(self, email, username, password=None, **extra_fields):
        if not email:
            raise ValueError('Users must have an email address')
        user = self.model(email=self.normalize_email(email), username=username, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, username, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', UserRole.ADMIN.value)
        return self.create_user(email, username, password, **extra_fields)


class UserModel(AbstractBaseUser, PermissionsMixin):
    """User account model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    username = models.CharField(max_length=150, unique=True)
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices(),
        default=UserRole.STUDENT.value,
        db_index=True,
    )
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']

    def __str__(self):
        return self.email

    @property
    def events_registered(self) -> set:
        """Event ids this user registered for."""
        return set(self.registered_events.values_list('event_id', flat=True))


class UserEventModel(models.Model):
    """One entry of a user's registered-events set."""

    user = models.ForeignKey(UserModel, on_delete=models.CASCADE, related_name='registered_events')
    event_id = models.CharField(max_length=64)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'user_events_registered'
        constraints = [
            models.UniqueConstraint(fields=['user', 'event_id'], name='uniq_user_event_registered'),
        ]

    def __str__(self):
        return f"{self.user_id} -> {self.event_id}"
