"""
Registrations app configuration.
"""
from django.apps import AppConfig


class RegistrationsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.registrations'
    label = 'registrations'
    verbose_name = 'Registrations'

    def ready(self):
        from .interfaces import admin  # noqa: F401
