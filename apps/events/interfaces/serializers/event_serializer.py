"""
Event serializers.
"""
from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for event output."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    venue = serializers.CharField(read_only=True)
    starts_at = serializers.DateTimeField(read_only=True, allow_null=True)
    registrations = serializers.IntegerField(read_only=True)
