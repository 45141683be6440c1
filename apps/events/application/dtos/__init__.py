from .event_dto import EventDTO

__all__ = ['EventDTO']
