from .registration_model import RegistrationModel

__all__ = ['RegistrationModel']
