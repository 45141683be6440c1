from .django_registration_repository import DjangoRegistrationRepository

__all__ = ['DjangoRegistrationRepository']
