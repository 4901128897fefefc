"""
Charge lookup for payment intents.

The storefront stores PaymentIntent IDs; back-office tools that work with
charges ask this service for the charge behind an intent.
"""

from __future__ import annotations

from core.services import BaseService

from payments.adapters import StripeAdapter
from payments.exceptions import ChargeNotFoundError, PaymentValidationError
from payments.references import is_payment_intent_id


class ChargeLookupService(BaseService):
    """Resolve the latest charge ID of a Stripe PaymentIntent."""

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
    def get_charge_id(cls, payment_intent_id: str | None) -> str:
        """
        Return the charge ID (ch_xxx) behind a PaymentIntent.

        Raises:
            PaymentValidationError: Missing or non-PaymentIntent ID
            ChargeNotFoundError: The intent has no charge yet
        """
        if not is_payment_intent_id(payment_intent_id):
            raise PaymentValidationError(
                "A valid paymentIntentId (pi_...) is required",
                details={"paymentIntentId": payment_intent_id},
            )

        intent = cls.get_stripe_adapter().retrieve_payment_intent(
            payment_intent_id,
            expand_latest_charge=True,
        )

        if not intent.latest_charge_id:
            raise ChargeNotFoundError(
                "No charge found for this payment intent",
                details={
                    "payment_intent_id": payment_intent_id,
                    "status": intent.status,
                },
            )

        cls.get_logger().info(
            "Resolved charge for payment intent",
            extra={
                "payment_intent_id": payment_intent_id,
                "charge_id": intent.latest_charge_id,
            },
        )
        return intent.latest_charge_id
