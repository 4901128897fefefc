"""
Payment-specific exceptions.

Exception Hierarchy:
    PaymentError (base for payment domain, HTTP 500)
    ├── PaymentNotFoundError (HTTP 404)
    │   └── ChargeNotFoundError - No Stripe charge behind the invoice/intent
    ├── PaymentValidationError (HTTP 400)
    │   └── AmountExceedsAvailableError - Refund above the refundable balance
    └── PaymentProcessingError (HTTP 500)
        └── StripeError - Base for all Stripe errors
            ├── StripeCardDeclinedError - Card declined (permanent)
            ├── StripeInvalidRequestError - Invalid request params (permanent)
            ├── StripeRateLimitError - Rate limited (transient)
            └── StripeAPIUnavailableError - API unavailable (transient)

Nothing in the payment flows retries on these errors; is_retryable only
tells the caller whether trying again later could succeed.

Usage:
    from payments.exceptions import ChargeNotFoundError

    raise ChargeNotFoundError(
        "No Stripe charge found for this invoice",
        details={"invoice_id": str(invoice_id)},
    )
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from rest_framework import status

from core.exceptions import BaseApplicationError

if TYPE_CHECKING:
    from typing import Any


# =============================================================================
# Payment Domain Exceptions
# =============================================================================


class PaymentError(BaseApplicationError):
    """
    Base exception for all payment operations.

    Inherits from BaseApplicationError so API views render it through the
    shared exception handler.
    """

    default_error_code: str = "PAYMENT_ERROR"


class PaymentNotFoundError(PaymentError):
    """Raised when a payment entity cannot be found."""

    default_error_code: str = "PAYMENT_NOT_FOUND"
    status_code: int = status.HTTP_404_NOT_FOUND


class ChargeNotFoundError(PaymentNotFoundError):
    """
    Raised when no Stripe charge can be resolved.

    Use for:
    - Invoice without a succeeded payment record
    - Payment record without a Stripe reference
    - PaymentIntent without a latest charge
    """

    default_error_code: str = "CHARGE_NOT_FOUND"


class PaymentValidationError(PaymentError):
    """
    Raised when payment input validation fails.

    Use for:
    - Missing invoice ID or reason
    - Non-positive or below-minimum amounts
    - Malformed Stripe IDs
    """

    default_error_code: str = "PAYMENT_VALIDATION_ERROR"
    status_code: int = status.HTTP_400_BAD_REQUEST


class AmountExceedsAvailableError(PaymentValidationError):
    """
    Raised when a refund asks for more than the charge has left.

    Attributes:
        available: Refundable balance in major units
        requested: Requested amount in major units
    """

    default_error_code: str = "AMOUNT_EXCEEDS_AVAILABLE"

    def __init__(
        self,
        available: Decimal,
        requested: Decimal,
        currency: str = "",
    ):
        self.available = available
        self.requested = requested
        suffix = f" {currency.upper()}" if currency else ""
        super().__init__(
            f"Refund amount too high. Maximum available: {available:.2f}{suffix}",
            details={
                "available": f"{available:.2f}",
                "requested": str(requested),
            },
        )


class PaymentProcessingError(PaymentError):
    """Raised when payment processing fails upstream."""

    default_error_code: str = "PAYMENT_PROCESSING_ERROR"


# =============================================================================
# Stripe-Specific Exceptions
# =============================================================================


class StripeError(PaymentProcessingError):
    """
    Base exception for all Stripe-related errors.

    Attributes:
        stripe_code: Stripe's internal error code
        decline_code: Card decline code (if applicable)
        is_retryable: Whether the operation could succeed if tried again
    """

    default_error_code: str = "STRIPE_ERROR"
    is_retryable: bool = False

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        stripe_code: str | None = None,
        decline_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if stripe_code:
            details["stripe_code"] = stripe_code
        if decline_code:
            details["decline_code"] = decline_code
        super().__init__(message, error_code=error_code, details=details)
        self.stripe_code = stripe_code
        self.decline_code = decline_code


# -----------------------------------------------------------------------------
# Permanent Errors
# -----------------------------------------------------------------------------


class StripeCardDeclinedError(StripeError):
    """Card was declined by the issuing bank. decline_code holds the reason."""

    default_error_code: str = "CARD_DECLINED"
    is_retryable: bool = False


class StripeInvalidRequestError(StripeError):
    """
    Invalid request parameters sent to Stripe.

    Possible causes:
    - Unknown charge or PaymentIntent ID
    - Refund larger than what Stripe still holds for the charge
    - Invalid API key (stripe_code="authentication_error")
    """

    default_error_code: str = "INVALID_STRIPE_REQUEST"
    is_retryable: bool = False


# -----------------------------------------------------------------------------
# Transient Errors
# -----------------------------------------------------------------------------


class StripeRateLimitError(StripeError):
    """Rate limited by the Stripe API."""

    default_error_code: str = "STRIPE_RATE_LIMITED"
    is_retryable: bool = True


class StripeAPIUnavailableError(StripeError):
    """Stripe could not be reached, returned a server error, or timed out."""

    default_error_code: str = "STRIPE_API_UNAVAILABLE"
    is_retryable: bool = True
