"""
Registrations admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.registration_model import RegistrationModel


@admin.register(RegistrationModel)
class RegistrationAdmin(admin.ModelAdmin):
    """Read-only admin for registration records."""
    list_display = ('id', 'event', 'name', 'usn', 'email', 'semester', 'created_at')
    list_filter = ('semester', 'created_at')
    search_fields = ('id', 'usn', 'name', 'email', 'event__name')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'event', 'name', 'usn', 'email', 'semester', 'submitted_by', 'created_at')

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
