"""
Users app configuration.
Accounts, roles and per-user registration history.
"""
from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.users'
    label = 'users'
    verbose_name = 'Users'

    def ready(self):
        from .interfaces import admin  # noqa: F401
