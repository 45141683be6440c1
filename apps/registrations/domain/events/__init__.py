# Domain events
from .registration_submitted import RegistrationSubmitted

__all__ = ['RegistrationSubmitted']
