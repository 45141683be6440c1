# Domain events
from .user_signed_up import UserSignedUp

__all__ = ['UserSignedUp']
