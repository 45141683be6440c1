"""
User role value object.
"""
from enum import Enum


class UserRole(str, Enum):
    """Roles a user account can hold."""
    STUDENT = 'student'
    ORGANIZER = 'organizer'
    ADMIN = 'admin'

    @classmethod
    def choices(cls):
        return [(role.value, role.name.title()) for role in cls]
