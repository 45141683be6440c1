"""
Users admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.user_model import UserModel, UserEventModel


class UserEventInline(admin.TabularInline):
    """Inline for the registered-events set."""
    model = UserEventModel
    extra = 0
    readonly_fields = ('event_id', 'created_at')


@admin.register(UserModel)
class UserAdmin(admin.ModelAdmin):
    """Admin configuration for User model."""
    list_display = ('email', 'username', 'role', 'is_active', 'is_staff', 'created_at')
    list_filter = ('role', 'is_active', 'is_staff', 'is_superuser', 'created_at')
    search_fields = ('email', 'username')
    ordering = ('-created_at',)
    inlines = [UserEventInline]

    fieldsets = (
        (None, {'fields': ('email', 'username')}),
        ('Permissions', {'fields': ('role', 'is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'created_at', 'updated_at')}),
    )

    readonly_fields = ('created_at', 'updated_at', 'last_login')
