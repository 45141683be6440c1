# Django model discovery
from .infrastructure.models import EventModel

__all__ = ['EventModel']
