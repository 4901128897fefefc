"""
Payment adapters for external services.

All Stripe API calls go through StripeAdapter to ensure consistent error
handling, timeouts and logging.

Usage:
    from payments.adapters import StripeAdapter, CreatePaymentIntentParams

    result = StripeAdapter.create_payment_intent(
        CreatePaymentIntentParams(amount_cents=5000, currency="eur")
    )
"""

from payments.adapters.stripe_adapter import (
    ChargeResult,
    CreatePaymentIntentParams,
    PaymentIntentResult,
    RefundResult,
    StripeAdapter,
)

__all__ = [
    "ChargeResult",
    "CreatePaymentIntentParams",
    "PaymentIntentResult",
    "RefundResult",
    "StripeAdapter",
]
