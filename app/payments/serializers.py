"""
DRF serializers for payments app.

This module provides request serializers for:
- Operator refunds
- Charge lookup by PaymentIntent
- Storefront checkout PaymentIntents

Request bodies use the camelCase keys the storefront sends (invoiceId,
adminNotes, paymentIntentId). Field errors surface as HTTP 400 through the
shared exception handler.

Related files:
    - services/: RefundService, ChargeLookupService, CheckoutService
    - views.py: Payment API views
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers


class RefundRequestSerializer(serializers.Serializer):
    """
    Refund request from the admin dashboard.

    Fields:
        invoiceId: Invoice whose latest payment is refunded
        amount: Amount in major units (rounded to cents by the service)
        reason: Reason shown to the customer
        adminNotes: Optional internal notes
    """

    invoiceId = serializers.UUIDField()
    # No precision cap: JS clients send floats such as 59.970000000000006
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)
    reason = serializers.CharField(max_length=1000, trim_whitespace=True)
    adminNotes = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=2000,
    )

    def validate_amount(self, value: Decimal) -> Decimal:
        if value <= 0:
            raise serializers.ValidationError("Amount must be greater than zero.")
        return value


class ChargeIdRequestSerializer(serializers.Serializer):
    """Lookup body: {"paymentIntentId": "pi_..."}."""

    paymentIntentId = serializers.CharField(max_length=255)


class PaymentIntentCreateSerializer(serializers.Serializer):
    """
    Storefront checkout body.

    amount is in minor units (cents); the minimum is enforced by
    CheckoutService so the error message names it.
    """

    amount = serializers.IntegerField()
    currency = serializers.CharField(max_length=3, default="eur")
