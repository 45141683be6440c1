from .register_for_event import RegisterForEventUseCase
from .reconcile_registration_count import ReconcileRegistrationCountUseCase

__all__ = ['RegisterForEventUseCase', 'ReconcileRegistrationCountUseCase']
