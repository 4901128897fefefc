"""
Payment services for coordinating Stripe operations.

This module provides:
- RefundService: Refunds an invoice's latest payment
- ChargeLookupService: Finds the charge behind a PaymentIntent
- CheckoutService: Creates storefront PaymentIntents

Usage:
    from payments.services import RefundRequest, RefundService

    outcome = RefundService.process_refund(
        RefundRequest(invoice_id=invoice.id, amount=Decimal("25.00"), reason="Late"),
        processed_by=request.user,
    )

    from payments.services import ChargeLookupService

    charge_id = ChargeLookupService.get_charge_id("pi_xxx")
"""

from payments.services.charge_service import ChargeLookupService
from payments.services.checkout_service import CheckoutService
from payments.services.refund_service import (
    RefundOutcome,
    RefundRequest,
    RefundService,
)

__all__ = [
    "ChargeLookupService",
    "CheckoutService",
    "RefundOutcome",
    "RefundRequest",
    "RefundService",
]
