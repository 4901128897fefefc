"""
Invoice model.

Invoices are issued from the admin billing screen. The refund flow only
references them: refunds and payment records hang off an invoice, but no
payment operation changes the invoice row itself.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel


class Invoice(UUIDPrimaryKeyMixin, BaseModel):
    """
    Amount billed to a customer.

    Fields:
        invoice_number: Human-facing unique number (e.g. "FAC-2024-0001")
        customer: Registered customer, if any (kept null after account deletion)
        customer_name: Billing name as printed on the invoice
        customer_email: Billing email as printed on the invoice
        status: Billing status
        total_amount: Total including tax, in major units
        amount_paid: Sum of payments received, in major units
        currency: ISO 4217 code
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        SENT = "sent", "Sent"
        PAID = "paid", "Paid"
        PARTIALLY_PAID = "partially_paid", "Partially paid"
        OVERDUE = "overdue", "Overdue"
        CANCELLED = "cancelled", "Cancelled"

    invoice_number = models.CharField(
        max_length=50,
        unique=True,
        help_text="Unique invoice number",
    )
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="invoices",
        help_text="Registered customer this invoice was issued to",
    )
    customer_name = models.CharField(
        max_length=255,
        help_text="Billing name",
    )
    customer_email = models.EmailField(
        blank=True,
        help_text="Billing email",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
        help_text="Billing status",
    )
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Total including tax, in major currency units",
    )
    amount_paid = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Amount received so far, in major currency units",
    )
    currency = models.CharField(
        max_length=3,
        default="EUR",
        help_text="ISO 4217 currency code",
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Invoice"
        verbose_name_plural = "Invoices"

    def __str__(self) -> str:
        return f"Invoice {self.invoice_number} ({self.total_amount} {self.currency})"

    @property
    def balance_due(self) -> Decimal:
        return self.total_amount - self.amount_paid
