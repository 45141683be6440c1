"""
Event Django ORM models.
"""
from django.db import models

from ...domain.entities.event import generate_event_id


class EventModel(models.Model):
    """Event model."""

    id = models.CharField(primary_key=True, max_length=64, default=generate_event_id, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    venue = models.CharField(max_length=255, blank=True)
    starts_at = models.DateTimeField(null=True, blank=True, db_index=True)
    registrations = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events'
        ordering = ['-created_at']

    def __str__(self):
        return self.name
