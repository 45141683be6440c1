from .django_event_repository import DjangoEventRepository

__all__ = ['DjangoEventRepository']
