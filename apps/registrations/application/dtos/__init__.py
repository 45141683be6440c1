# DTOs
from .registration_dto import RegistrationCreateDTO, RegistrationDTO, ReconcileResultDTO

__all__ = ['RegistrationCreateDTO', 'RegistrationDTO', 'ReconcileResultDTO']
