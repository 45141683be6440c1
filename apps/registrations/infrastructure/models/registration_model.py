"""
Registration Django ORM models.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone


class RegistrationModel(models.Model):
    """Registration record keyed by ``<event_id>_<usn>``."""

    id = models.CharField(primary_key=True, max_length=255)
    event = models.ForeignKey(
        'events.EventModel',
        on_delete=models.PROTECT,
        related_name='registration_records',
    )
    name = models.CharField(max_length=255)
    usn = models.CharField(max_length=64)
    email = models.CharField(max_length=254)
    semester = models.CharField(max_length=64)
    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='event_registrations',
    )
    # Time of the latest write; a resubmission replaces it.
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'registrations'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['event', 'usn'], name='uniq_registration_event_usn'),
        ]
        indexes = [
            models.Index(fields=['event', 'created_at'], name='registration_event_created_idx'),
        ]

    def __str__(self):
        return self.id
