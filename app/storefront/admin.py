from django.contrib import admin

from storefront.models import SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    """Single-row admin: no add once the row exists, no delete."""

    list_display = ["site_name", "contact_email", "currency", "updated_at"]
    readonly_fields = ["created_at", "updated_at"]

    def has_add_permission(self, request) -> bool:
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
