from .django_user_repository import DjangoUserRepository
from .django_user_history_repository import DjangoUserHistoryRepository

__all__ = ['DjangoUserRepository', 'DjangoUserHistoryRepository']
