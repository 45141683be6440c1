# Value objects
from .email import Email
from .identity import Identity
from .role import UserRole

__all__ = ['Email', 'Identity', 'UserRole']
