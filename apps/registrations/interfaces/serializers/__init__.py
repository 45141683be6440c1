# Serializers
from .registration_serializer import RegistrationSerializer, RegistrationCreateSerializer

__all__ = ['RegistrationSerializer', 'RegistrationCreateSerializer']
