"""
Stripe API adapter for payment operations.

This module provides the StripeAdapter class which encapsulates all
Stripe API interactions. All Stripe calls should go through this
adapter to ensure consistent error handling, timeouts and observability.

Features:
- Configurable timeout on all API calls
- Automatic error translation to domain exceptions
- Structured logging with timing metrics
- Plain result dataclasses instead of raw StripeObjects

Configuration (via settings):
- STRIPE_SECRET_KEY: Stripe API secret key
- STRIPE_API_TIMEOUT_SECONDS: API call timeout (default: 10)
- STRIPE_MAX_RETRIES: Network retries performed by the SDK (default: 0)

Usage:
    from payments.adapters import StripeAdapter

    charge = StripeAdapter.retrieve_charge("ch_xxx")
    refund = StripeAdapter.create_refund(
        charge_id=charge.id,
        amount_cents=6000,
        reason="requested_by_customer",
        metadata={"invoice_id": str(invoice.id)},
    )
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import stripe
from django.conf import settings

from payments.exceptions import (
    StripeAPIUnavailableError,
    StripeCardDeclinedError,
    StripeInvalidRequestError,
    StripeRateLimitError,
)


# =============================================================================
# Data Types
# =============================================================================


@dataclass
class CreatePaymentIntentParams:
    """
    Parameters for creating a Stripe PaymentIntent.

    Attributes:
        amount_cents: Payment amount in smallest currency unit (e.g., cents)
        currency: ISO 4217 currency code
        metadata: Key-value pairs to attach to the PaymentIntent
        automatic_payment_methods: Let Stripe pick methods from the dashboard
        payment_method_types: Explicit methods, used when automatic is off
        customer_id: Optional Stripe Customer ID
        idempotency_key: Optional key for idempotent creation
    """

    amount_cents: int
    currency: str
    metadata: dict[str, str] = field(default_factory=dict)
    automatic_payment_methods: bool = True
    payment_method_types: list[str] = field(default_factory=lambda: ["card"])
    customer_id: str | None = None
    idempotency_key: str | None = None

    def __post_init__(self) -> None:
        if self.amount_cents <= 0:
            raise ValueError("amount_cents must be positive")
        if not self.currency:
            raise ValueError("currency is required")


@dataclass
class ChargeResult:
    """
    Result from Stripe Charge operations.

    Attributes:
        id: Charge ID (ch_xxx)
        amount_cents: Captured amount in cents
        amount_refunded_cents: Amount already refunded in cents
        currency: Currency code
        status: Charge status (succeeded, pending, failed)
        payment_intent_id: PaymentIntent that created the charge, if any
        raw_response: Full Stripe response dict (for debugging)
    """

    id: str
    amount_cents: int
    amount_refunded_cents: int
    currency: str
    status: str
    payment_intent_id: str | None = None
    raw_response: dict[str, Any] = field(default_factory=dict)

    @property
    def refundable_cents(self) -> int:
        return self.amount_cents - self.amount_refunded_cents


@dataclass
class PaymentIntentResult:
    """
    Result from Stripe PaymentIntent operations.

    Attributes:
        id: PaymentIntent ID (pi_xxx)
        status: Current status (requires_payment_method, succeeded, etc.)
        amount_cents: Amount in cents
        currency: Currency code
        client_secret: Secret for client-side confirmation
        latest_charge_id: ID of the most recent charge, if any
        latest_charge: Full charge, only when retrieved with expansion
        metadata: Attached metadata
        raw_response: Full Stripe response dict (for debugging)
    """

    id: str
    status: str
    amount_cents: int
    currency: str
    client_secret: str | None = None
    latest_charge_id: str | None = None
    latest_charge: ChargeResult | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    raw_response: dict[str, Any] = field(default_factory=dict)


@dataclass
class RefundResult:
    """
    Result from Stripe Refund operations.

    Attributes:
        id: Refund ID (re_xxx)
        amount_cents: Refunded amount in cents
        currency: Currency code
        status: Refund status (pending, succeeded, failed, canceled, requires_action)
        charge_id: Refunded charge ID
        payment_intent_id: PaymentIntent of the refunded charge, if any
        metadata: Attached metadata
        raw_response: Full Stripe response dict
    """

    id: str
    amount_cents: int
    currency: str
    status: str
    charge_id: str | None = None
    payment_intent_id: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    raw_response: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Stripe Adapter
# =============================================================================


class StripeAdapter:
    """
    Adapter for Stripe API operations.

    All methods are classmethods - no instance state is maintained.
    Services hold a reference to this class (or a test double with the
    same methods) rather than calling stripe directly.

    Usage:
        intent = StripeAdapter.retrieve_payment_intent("pi_xxx", expand_latest_charge=True)
        charge = intent.latest_charge
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    # One HTTP client (and requests session) per process, rebuilt only when
    # the configured timeout changes
    _http_client: Any = None
    _http_client_timeout: float | None = None

    @classmethod
    def _configure_stripe(cls) -> None:
        """Configure Stripe client with API key, timeout and SDK retries."""
        stripe.api_key = settings.STRIPE_SECRET_KEY
        stripe.max_network_retries = getattr(settings, "STRIPE_MAX_RETRIES", 0)
        timeout = getattr(settings, "STRIPE_API_TIMEOUT_SECONDS", 10)
        if cls._http_client is None or cls._http_client_timeout != timeout:
            cls._http_client = stripe.RequestsClient(timeout=timeout)
            cls._http_client_timeout = timeout
        stripe.default_http_client = cls._http_client

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this adapter."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    # =========================================================================
    # Conversion Helpers
    # =========================================================================

    @staticmethod
    def _to_dict(obj: Any) -> dict[str, Any]:
        to_dict = getattr(obj, "to_dict", None)
        return to_dict() if callable(to_dict) else {}

    @classmethod
    def _charge_result(cls, charge: Any) -> ChargeResult:
        payment_intent = charge.payment_intent
        # payment_intent is an ID unless the caller expanded it
        if payment_intent is not None and not isinstance(payment_intent, str):
            payment_intent = payment_intent.id

        return ChargeResult(
            id=charge.id,
            amount_cents=charge.amount,
            amount_refunded_cents=charge.amount_refunded or 0,
            currency=charge.currency,
            status=charge.status,
            payment_intent_id=payment_intent,
            raw_response=cls._to_dict(charge),
        )

    @classmethod
    def _payment_intent_result(cls, intent: Any) -> PaymentIntentResult:
        latest_charge = getattr(intent, "latest_charge", None)
        latest_charge_id = None
        charge_result = None

        if isinstance(latest_charge, str):
            latest_charge_id = latest_charge
        elif latest_charge is not None:
            charge_result = cls._charge_result(latest_charge)
            latest_charge_id = charge_result.id

        return PaymentIntentResult(
            id=intent.id,
            status=intent.status,
            amount_cents=intent.amount,
            currency=intent.currency,
            client_secret=intent.client_secret,
            latest_charge_id=latest_charge_id,
            latest_charge=charge_result,
            metadata=dict(intent.metadata or {}),
            raw_response=cls._to_dict(intent),
        )

    # =========================================================================
    # Core Operations
    # =========================================================================

    @classmethod
    def create_payment_intent(
        cls,
        params: CreatePaymentIntentParams,
    ) -> PaymentIntentResult:
        """
        Create a Stripe PaymentIntent.

        Args:
            params: Parameters for creating the PaymentIntent

        Returns:
            PaymentIntentResult including the client_secret

        Raises:
            StripeInvalidRequestError: Invalid parameters
            StripeAPIUnavailableError: Stripe service unavailable
        """
        cls._configure_stripe()
        logger = cls.get_logger()

        log_context = {
            "operation": "create_payment_intent",
            "amount_cents": params.amount_cents,
            "currency": params.currency,
        }

        start_time = time.time()
        logger.info("Starting Stripe operation", extra=log_context)

        try:
            create_params: dict[str, Any] = {
                "amount": params.amount_cents,
                "currency": params.currency,
                "metadata": params.metadata,
            }
            if params.automatic_payment_methods:
                create_params["automatic_payment_methods"] = {"enabled": True}
            else:
                create_params["payment_method_types"] = params.payment_method_types
            if params.customer_id:
                create_params["customer"] = params.customer_id
            if params.idempotency_key:
                create_params["idempotency_key"] = params.idempotency_key

            intent = stripe.PaymentIntent.create(**create_params)

            duration_ms = (time.time() - start_time) * 1000
            logger.info(
                "Stripe operation completed",
                extra={
                    **log_context,
                    "payment_intent_id": intent.id,
                    "status": intent.status,
                    "duration_ms": duration_ms,
                },
            )

            return cls._payment_intent_result(intent)

        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            cls._handle_stripe_error(e, log_context, duration_ms)
            raise  # Never reached, but satisfies type checker

    @classmethod
    def retrieve_payment_intent(
        cls,
        payment_intent_id: str,
        expand_latest_charge: bool = False,
    ) -> PaymentIntentResult:
        """
        Retrieve a PaymentIntent by ID.

        Args:
            payment_intent_id: Stripe PaymentIntent ID (pi_xxx)
            expand_latest_charge: Also fetch the full latest charge

        Returns:
            PaymentIntentResult; latest_charge is set only when expanded
            and the intent has a charge

        Raises:
            StripeInvalidRequestError: PaymentIntent not found
        """
        cls._configure_stripe()
        logger = cls.get_logger()

        log_context = {
            "operation": "retrieve_payment_intent",
            "payment_intent_id": payment_intent_id,
            "expand_latest_charge": expand_latest_charge,
        }

        start_time = time.time()
        logger.debug("Starting Stripe operation", extra=log_context)

        try:
            if expand_latest_charge:
                intent = stripe.PaymentIntent.retrieve(
                    payment_intent_id,
                    expand=["latest_charge"],
                )
            else:
                intent = stripe.PaymentIntent.retrieve(payment_intent_id)

            duration_ms = (time.time() - start_time) * 1000
            logger.debug(
                "Stripe operation completed",
                extra={
                    **log_context,
                    "status": intent.status,
                    "duration_ms": duration_ms,
                },
            )

            return cls._payment_intent_result(intent)

        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            cls._handle_stripe_error(e, log_context, duration_ms)
            raise

    @classmethod
    def retrieve_charge(cls, charge_id: str) -> ChargeResult:
        """
        Retrieve a Charge by ID.

        Args:
            charge_id: Stripe Charge ID (ch_xxx)

        Returns:
            ChargeResult with amount and amount already refunded

        Raises:
            StripeInvalidRequestError: Charge not found
        """
        cls._configure_stripe()
        logger = cls.get_logger()

        log_context = {
            "operation": "retrieve_charge",
            "charge_id": charge_id,
        }

        start_time = time.time()
        logger.debug("Starting Stripe operation", extra=log_context)

        try:
            charge = stripe.Charge.retrieve(charge_id)

            duration_ms = (time.time() - start_time) * 1000
            logger.debug(
                "Stripe operation completed",
                extra={
                    **log_context,
                    "status": charge.status,
                    "duration_ms": duration_ms,
                },
            )

            return cls._charge_result(charge)

        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            cls._handle_stripe_error(e, log_context, duration_ms)
            raise

    @classmethod
    def create_refund(
        cls,
        charge_id: str,
        amount_cents: int,
        reason: str | None = None,
        metadata: dict[str, str] | None = None,
        idempotency_key: str | None = None,
    ) -> RefundResult:
        """
        Create a refund for a charge.

        Args:
            charge_id: Stripe Charge ID to refund
            amount_cents: Amount to refund in cents
            reason: Stripe reason code (duplicate, fraudulent, requested_by_customer)
            metadata: Key-value pairs to attach to the refund
            idempotency_key: Optional key for idempotent creation

        Returns:
            RefundResult with refund details

        Raises:
            StripeInvalidRequestError: Invalid charge or amount too large
            StripeAPIUnavailableError: Stripe service unavailable
        """
        cls._configure_stripe()
        logger = cls.get_logger()

        log_context = {
            "operation": "create_refund",
            "charge_id": charge_id,
            "amount_cents": amount_cents,
        }

        start_time = time.time()
        logger.info("Starting Stripe operation", extra=log_context)

        try:
            refund_params: dict[str, Any] = {
                "charge": charge_id,
                "amount": amount_cents,
                "metadata": metadata or {},
            }
            if reason:
                refund_params["reason"] = reason
            if idempotency_key:
                refund_params["idempotency_key"] = idempotency_key

            refund = stripe.Refund.create(**refund_params)

            duration_ms = (time.time() - start_time) * 1000
            logger.info(
                "Stripe operation completed",
                extra={
                    **log_context,
                    "refund_id": refund.id,
                    "status": refund.status,
                    "duration_ms": duration_ms,
                },
            )

            return RefundResult(
                id=refund.id,
                amount_cents=refund.amount,
                currency=refund.currency,
                status=refund.status,
                charge_id=refund.charge,
                payment_intent_id=refund.payment_intent,
                metadata=dict(refund.metadata or {}),
                raw_response=cls._to_dict(refund),
            )

        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            cls._handle_stripe_error(e, log_context, duration_ms)
            raise

    # =========================================================================
    # Error Handling
    # =========================================================================

    @classmethod
    def _handle_stripe_error(
        cls,
        error: Exception,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> None:
        """
        Translate Stripe exceptions to domain exceptions.

        Raises:
            StripeCardDeclinedError: Card was declined
            StripeInvalidRequestError: Invalid request or API key
            StripeRateLimitError: Rate limited
            StripeAPIUnavailableError: Connection, timeout, server or unknown error
        """
        logger = cls.get_logger()

        log_context = {**log_context, "duration_ms": duration_ms}

        if isinstance(error, stripe.CardError):
            decline_code = getattr(error, "decline_code", None)
            logger.warning(
                "Card error from Stripe",
                extra={**log_context, "decline_code": decline_code},
            )
            raise StripeCardDeclinedError(
                str(error.user_message or error),
                stripe_code=error.code,
                decline_code=decline_code,
            )

        elif isinstance(error, stripe.InvalidRequestError):
            logger.error(
                "Invalid request to Stripe",
                extra={**log_context, "stripe_code": error.code},
            )
            raise StripeInvalidRequestError(
                str(error.user_message or error),
                stripe_code=error.code,
            )

        elif isinstance(error, stripe.AuthenticationError):
            # Invalid API key - permanent, operational issue
            logger.critical(
                "Stripe authentication failed - check API key",
                extra=log_context,
            )
            raise StripeInvalidRequestError(
                "Stripe authentication failed",
                stripe_code="authentication_error",
            )

        elif isinstance(error, stripe.RateLimitError):
            logger.warning(
                "Rate limited by Stripe",
                extra=log_context,
            )
            raise StripeRateLimitError(
                "Stripe rate limit exceeded. Please retry.",
                stripe_code="rate_limit",
            )

        elif isinstance(error, stripe.APIConnectionError):
            # Network error or timeout
            logger.error(
                "Connection error to Stripe",
                extra=log_context,
                exc_info=True,
            )
            raise StripeAPIUnavailableError(
                "Could not connect to Stripe. Please retry.",
                stripe_code="api_connection_error",
            )

        elif isinstance(error, stripe.APIError):
            logger.error(
                "Stripe API error",
                extra=log_context,
                exc_info=True,
            )
            raise StripeAPIUnavailableError(
                "Stripe service error. Please retry.",
                stripe_code="api_error",
            )

        else:
            logger.error(
                f"Unexpected error from Stripe: {type(error).__name__}",
                extra=log_context,
                exc_info=True,
            )
            raise StripeAPIUnavailableError(
                f"Unexpected Stripe error: {error}",
                stripe_code="unknown_error",
            )
