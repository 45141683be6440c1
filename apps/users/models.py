# Django model discovery
from .infrastructure.models import UserModel, UserEventModel

__all__ = ['UserModel', 'UserEventModel']
