# Serializers
from .user_serializer import UserSerializer, UserCreateSerializer, RegisteredEventsSerializer
from .auth_serializer import LoginSerializer, TokenSerializer

__all__ = [
    'UserSerializer',
    'UserCreateSerializer',
    'RegisteredEventsSerializer',
    'LoginSerializer',
    'TokenSerializer',
]
