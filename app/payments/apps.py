"""
Payments app configuration.

This app provides invoice payment infrastructure:
- Invoices, payment records and refunds
- Stripe integration through payments.adapters
- Operator refunds and storefront checkout
"""

from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    """Configuration for the payments application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
    verbose_name = "Payments"
