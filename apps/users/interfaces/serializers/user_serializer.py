"""
User serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.role import UserRole


class UserSerializer(serializers.Serializer):
    """Serializer for user output."""
    id = serializers.UUIDField(read_only=True)
    email = serializers.EmailField(read_only=True)
    username = serializers.CharField(read_only=True)
    role = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    events_registered = serializers.ListField(child=serializers.CharField(), read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class UserCreateSerializer(serializers.Serializer):
    """Serializer for account sign up."""
    email = serializers.EmailField()
    username = serializers.CharField(min_length=3, max_length=150)
    password = serializers.CharField(min_length=8, write_only=True)
    role = serializers.ChoiceField(
        choices=[UserRole.STUDENT.value, UserRole.ORGANIZER.value],
        required=False,
    )


class RegisteredEventsSerializer(serializers.Serializer):
    """Serializer for a user's registered-events set."""
    events_registered = serializers.ListField(child=serializers.CharField(), read_only=True)
