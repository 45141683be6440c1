"""
Events admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.event_model import EventModel


@admin.register(EventModel)
class EventAdmin(admin.ModelAdmin):
    """Admin configuration for Event model."""
    list_display = ('name', 'id', 'venue', 'starts_at', 'registrations', 'created_at')
    list_filter = ('starts_at', 'created_at')
    search_fields = ('id', 'name', 'venue')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'registrations', 'created_at', 'updated_at')
