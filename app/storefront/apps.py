from django.apps import AppConfig


class StorefrontConfig(AppConfig):
    """Configuration for the storefront application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "storefront"
    verbose_name = "Storefront"
