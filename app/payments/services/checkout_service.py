"""
Checkout service for the public storefront.

Creates the Stripe PaymentIntent the browser confirms with Stripe.js. The
amount arrives in minor units straight from the cart.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings

from core.services import BaseService

from payments.adapters import (
    CreatePaymentIntentParams,
    PaymentIntentResult,
    StripeAdapter,
)
from payments.exceptions import PaymentValidationError

DEFAULT_CURRENCY = "eur"


class CheckoutService(BaseService):
    """Service for starting storefront payments."""

    # Stripe adapter - can be injected for testing
    _stripe_adapter: type | None = None

    @classmethod
    def get_stripe_adapter(cls) -> type:
        """Get the Stripe adapter class."""
        return cls._stripe_adapter or StripeAdapter

    @classmethod
    def set_stripe_adapter(cls, adapter: type | None) -> None:
        """Set the Stripe adapter class (for testing)."""
        cls._stripe_adapter = adapter

    @classmethod
    def create_payment_intent(
        cls,
        amount_cents: int | None,
        currency: str | None = None,
    ) -> PaymentIntentResult:
        """
        Create a PaymentIntent for a storefront checkout.

        Args:
            amount_cents: Amount in minor units
            currency: ISO currency code, defaults to EUR

        Returns:
            PaymentIntentResult carrying the client_secret

        Raises:
            PaymentValidationError: Amount missing or below the Stripe minimum
        """
        minimum = settings.STRIPE_MINIMUM_CHARGE_CENTS
        if amount_cents is None or amount_cents < minimum:
            raise PaymentValidationError(
                f"Minimum amount: {Decimal(minimum) / 100:.2f}",
                error_code="AMOUNT_TOO_SMALL",
                details={"amount": amount_cents, "minimum": minimum},
            )

        params = CreatePaymentIntentParams(
            amount_cents=amount_cents,
            currency=(currency or DEFAULT_CURRENCY).lower(),
            metadata={"source": settings.STRIPE_PAYMENT_SOURCE},
            automatic_payment_methods=True,
        )
        intent = cls.get_stripe_adapter().create_payment_intent(params)

        cls.get_logger().info(
            "Checkout payment intent created",
            extra={
                "payment_intent_id": intent.id,
                "amount_cents": amount_cents,
                "currency": params.currency,
            },
        )
        return intent
