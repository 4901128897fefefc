"""
Refund model for tracking money returned to customers.

A Refund row is written after Stripe has confirmed the refund. It is a
bookkeeping copy: if writing it fails, the Stripe refund still stands and
the caller is told about the partial success instead.

Usage:
    from payments.models import Refund

    Refund.objects.create(
        invoice=invoice,
        stripe_refund_id="re_xxx",
        stripe_payment_intent_id="pi_xxx",
        amount=Decimal("60.00"),
        reason="Event cancelled",
        status=Refund.Status.SUCCEEDED,
        processed_by=request.user,
    )
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel


class Refund(UUIDPrimaryKeyMixin, BaseModel):
    """
    Money returned to a customer through Stripe.

    Created once per successful Stripe refund call and never updated by
    the refund flow.

    Fields:
        invoice: Invoice whose payment was refunded
        stripe_refund_id: Stripe Refund ID (re_xxx)
        stripe_payment_intent_id: PaymentIntent of the refunded charge, if any
        amount: Refunded amount in major units
        reason: Reason given by the operator
        status: Status reported by Stripe when the refund was created
        admin_notes: Optional internal note
        processed_by: Operator who issued the refund
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        SUCCEEDED = "succeeded", "Succeeded"
        FAILED = "failed", "Failed"
        CANCELED = "canceled", "Canceled"
        REQUIRES_ACTION = "requires_action", "Requires action"

    invoice = models.ForeignKey(
        "payments.Invoice",
        on_delete=models.PROTECT,
        related_name="refunds",
        help_text="Invoice whose payment was refunded",
    )
    stripe_refund_id = models.CharField(
        max_length=255,
        unique=True,
        help_text="Stripe Refund ID (re_xxx)",
    )
    stripe_payment_intent_id = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        db_index=True,
        help_text="Stripe PaymentIntent ID of the refunded charge",
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Refunded amount in major currency units",
    )
    reason = models.TextField(
        help_text="Refund reason entered by the operator",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        db_index=True,
        help_text="Refund status as reported by Stripe",
    )
    admin_notes = models.TextField(
        null=True,
        blank=True,
        help_text="Internal note attached to the refund",
    )
    processed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="processed_refunds",
        help_text="Operator who issued the refund",
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Refund"
        verbose_name_plural = "Refunds"
        indexes = [
            models.Index(
                fields=["invoice", "created_at"],
                name="refund_invoice_created_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name="refund_amount_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"Refund({self.id}, {self.status}, {self.amount})"
