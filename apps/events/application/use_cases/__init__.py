from .get_event import GetEventUseCase

__all__ = ['GetEventUseCase']
