"""
PaymentRecord model.

One row per payment attempt against an invoice. Card payments made through
the website carry Stripe identifiers; offline payments (bank transfer,
cheque, cash) only carry a free-form reference.

Older checkout code stored only the PaymentIntent ID in `reference`; newer
code also fills `stripe_charge_id`. processor_reference hides the difference.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel
from payments.references import ProcessorReference, parse_processor_reference


class PaymentRecordQuerySet(models.QuerySet):
    def succeeded(self):
        return self.filter(status=PaymentRecord.Status.SUCCEEDED)

    def latest_succeeded_for_invoice(self, invoice_id):
        """Most recent succeeded payment for an invoice, or None."""
        return (
            self.succeeded()
            .filter(invoice_id=invoice_id)
            .order_by("-created_at")
            .first()
        )


class PaymentRecord(UUIDPrimaryKeyMixin, BaseModel):
    """
    A payment received (or attempted) against an invoice.

    Fields:
        invoice: Invoice being paid
        amount: Amount in major units
        payment_method: How the customer paid
        status: succeeded, pending or failed
        reference: Stripe PaymentIntent ID or an offline reference
        stripe_charge_id: Stripe Charge ID (ch_xxx) when known
        notes: Free-form admin notes
        created_by: Operator who recorded the payment
    """

    class Method(models.TextChoices):
        BANK_TRANSFER = "bank_transfer", "Bank transfer"
        CHEQUE = "cheque", "Cheque"
        CASH = "cash", "Cash"
        CARD = "card", "Card"
        DIRECT_DEBIT = "direct_debit", "Direct debit"
        REFUND = "refund", "Refund"

    class Status(models.TextChoices):
        SUCCEEDED = "succeeded", "Succeeded"
        PENDING = "pending", "Pending"
        FAILED = "failed", "Failed"

    invoice = models.ForeignKey(
        "payments.Invoice",
        on_delete=models.PROTECT,
        related_name="payment_records",
        help_text="Invoice this payment applies to",
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Payment amount in major currency units",
    )
    payment_method = models.CharField(
        max_length=20,
        choices=Method.choices,
        default=Method.CARD,
        help_text="Payment method",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
        help_text="Payment status",
    )
    reference = models.CharField(
        max_length=255,
        blank=True,
        db_index=True,
        help_text="Stripe PaymentIntent ID (pi_xxx) or offline reference",
    )
    stripe_charge_id = models.CharField(
        max_length=255,
        blank=True,
        help_text="Stripe Charge ID (ch_xxx)",
    )
    notes = models.TextField(
        blank=True,
        help_text="Admin notes",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="recorded_payments",
        help_text="Operator who recorded this payment",
    )

    objects = PaymentRecordQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Payment record"
        verbose_name_plural = "Payment records"
        indexes = [
            models.Index(
                fields=["invoice", "status", "created_at"],
                name="payrec_invoice_status_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"PaymentRecord({self.id}, {self.status}, {self.amount})"

    @property
    def processor_reference(self) -> ProcessorReference | None:
        """Stripe charge or PaymentIntent this payment points at, if any."""
        return parse_processor_reference(
            charge_id=self.stripe_charge_id,
            reference=self.reference,
        )
