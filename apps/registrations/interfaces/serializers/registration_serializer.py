"""
Registration serializers.
"""
from rest_framework import serializers


class RegistrationSerializer(serializers.Serializer):
    """Serializer for registration output."""
    registration_id = serializers.CharField(read_only=True)
    event_id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    usn = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
    semester = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class RegistrationCreateSerializer(serializers.Serializer):
    """
    Request body of a registration submission.

    Describes the schema and names the accepted fields. Values are checked
    by the use case, after the caller and the event, and reported as
    INVALID_INPUT with the offending field.
    """
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, trim_whitespace=False)
    usn = serializers.CharField(max_length=64, required=False, allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(max_length=254, required=False, allow_blank=True, trim_whitespace=False)
    semester = serializers.CharField(max_length=64, required=False, allow_blank=True, trim_whitespace=False)
