"""
Storefront models.

SiteSettings is a single row (pk=1) edited from the admin dashboard. Use
SiteSettings.load() to read it; the row is created with defaults on first
access.
"""

from django.db import models

from core.model_mixins import SingletonMixin
from core.models import BaseModel


class SiteSettings(SingletonMixin, BaseModel):
    """
    Shop-wide settings.

    Fields:
        site_name: Name shown in the header and emails
        contact_email: Public contact address
        currency: Display and checkout currency
    """

    class Currency(models.TextChoices):
        EUR = "EUR", "Euro"
        USD = "USD", "US dollar"
        GBP = "GBP", "Pound sterling"

    site_name = models.CharField(
        max_length=100,
        default="OMEGA",
        help_text="Site name shown to customers",
    )
    contact_email = models.EmailField(
        default="contact@omega.com",
        help_text="Public contact email",
    )
    currency = models.CharField(
        max_length=3,
        choices=Currency.choices,
        default=Currency.EUR,
        help_text="Shop currency",
    )

    class Meta:
        verbose_name = "site settings"
        verbose_name_plural = "site settings"

    def __str__(self) -> str:
        return self.site_name
