from .event_model import EventModel

__all__ = ['EventModel']
