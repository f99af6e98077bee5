from django.contrib import admin
from django.utils.html import format_html
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin interface for shop accounts.

    Provides:
    - User listing with role badge
    - Filtering by admin flag
    - Search by username and email
    - Bulk actions to grant or revoke shop admin rights
    """

    list_display = [
        'username',
        'email',
        'is_admin_badge',
    ]

    list_filter = [
        'is_admin',
    ]

    search_fields = [
        'username',
        'email',
    ]

    ordering = ['username']

    fieldsets = (
        ('Basic Information', {
            'fields': ('username', 'email', 'password')
        }),
        ('Permissions', {
            'fields': ('is_admin',),
        }),
    )

    def is_admin_badge(self, obj):
        """Display shop role as colored badge."""
        if obj.is_admin:
            return format_html(
                '<span style="background: #A47449; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Admin</span>'
            )
        return format_html(
            '<span style="background: #ccc; color: #666; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Customer</span>'
        )
    is_admin_badge.short_description = 'Role'
    is_admin_badge.admin_order_field = 'is_admin'

    actions = [
        'grant_admin',
        'revoke_admin',
    ]

    @admin.action(description='Grant shop admin rights')
    def grant_admin(self, request, queryset):
        count = queryset.update(is_admin=True)
        self.message_user(request, f'Granted admin rights to {count} user(s).')

    @admin.action(description='Revoke shop admin rights')
    def revoke_admin(self, request, queryset):
        count = queryset.update(is_admin=False)
        self.message_user(request, f'Revoked admin rights from {count} user(s).')
