"""
Events app configuration.
Event catalog lookups and the per-event registration counter.
"""
from django.apps import AppConfig


class EventsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.events'
    label = 'events'
    verbose_name = 'Events'

    def ready(self):
        from .interfaces import admin  # noqa: F401
