# Serializers
from .event_serializer import EventSerializer

__all__ = ['EventSerializer']
