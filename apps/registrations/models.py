# Django model discovery
from .infrastructure.models import RegistrationModel

__all__ = ['RegistrationModel']
