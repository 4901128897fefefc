"""
Refund service for returning invoice payments to customers.

This module provides the RefundService class which handles the operator
refund flow:

1. Validate the request (invoice, positive amount, reason)
2. Find the most recent succeeded payment record for the invoice
3. Resolve the Stripe charge behind it (directly, or via the PaymentIntent)
4. Check the requested amount against what the charge has left
5. Create the refund at Stripe
6. Record a local Refund row

Stripe is the source of truth. Once step 5 succeeds the money has moved, so
a failure in step 6 is reported back as a partial success instead of an
error, and Stripe is never called a second time.

Usage:
    from payments.services import RefundRequest, RefundService

    outcome = RefundService.process_refund(
        RefundRequest(
            invoice_id=invoice.id,
            amount=Decimal("60.00"),
            reason="Damaged on arrival",
        ),
        processed_by=request.user,
    )

    if outcome.ledger_error:
        ...  # refund went through, local record is missing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from django.db import DatabaseError

from core.services import BaseService

from payments.adapters import ChargeResult, RefundResult, StripeAdapter
from payments.exceptions import (
    AmountExceedsAvailableError,
    ChargeNotFoundError,
    PaymentValidationError,
)
from payments.models import PaymentRecord, Refund
from payments.references import ChargeReference, PaymentIntentReference

if TYPE_CHECKING:
    import uuid

    from authentication.models import User


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

MINOR_UNIT = Decimal("0.01")

# Reason code sent to Stripe; the operator's free-text reason goes in metadata
STRIPE_REFUND_REASON = "requested_by_customer"


# =============================================================================
# Request / Result Types
# =============================================================================


@dataclass
class RefundRequest:
    """
    Operator refund request.

    Attributes:
        invoice_id: Invoice whose latest payment is refunded
        amount: Amount in major units (e.g. Decimal("60.00"))
        reason: Free-text reason shown to the customer
        admin_notes: Optional internal notes
    """

    invoice_id: uuid.UUID | str | None
    amount: Decimal | None
    reason: str | None
    admin_notes: str | None = None


@dataclass
class RefundOutcome:
    """
    Result of a refund that reached Stripe.

    Attributes:
        amount: Refunded amount in major units, rounded to the minor unit
        currency: Currency of the refunded charge (upper case)
        stripe_refund: Refund as returned by Stripe
        refund: Local Refund row, None when it could not be written
        ledger_error: Database error message when the local write failed
    """

    amount: Decimal
    currency: str
    stripe_refund: RefundResult
    refund: Refund | None = None
    ledger_error: str | None = None

    @property
    def is_partial(self) -> bool:
        return self.ledger_error is not None


# =============================================================================
# Refund Service
# =============================================================================


class RefundService(BaseService):
    """
    Service for refunding invoice payments through Stripe.

    Charge Resolution:
        - ChargeReference: Charge.retrieve, the PaymentIntent is never fetched
        - PaymentIntentReference: PaymentIntent.retrieve with latest_charge
          expanded
        - No reference, or an intent without a charge: ChargeNotFoundError

    Known Gap:
        The ceiling check and the refund call are not atomic and no
        idempotency key is sent. Two concurrent requests can both pass the
        check; Stripe's own per-charge limit rejects the one that overdraws.
    """

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

    # =========================================================================
    # Public API
    # =========================================================================

    @classmethod
    def process_refund(
        cls,
        request: RefundRequest,
        processed_by: User,
    ) -> RefundOutcome:
        """
        Refund part or all of an invoice's latest payment.

        Args:
            request: The refund request
            processed_by: Operator issuing the refund

        Returns:
            RefundOutcome; ledger_error is set when Stripe refunded but the
            local Refund row could not be saved

        Raises:
            PaymentValidationError: Missing or invalid input
            ChargeNotFoundError: No charge behind the invoice
            AmountExceedsAvailableError: Amount above the refundable balance
            StripeError: Stripe rejected or could not process a call
        """
        amount = cls.validate_request(request)

        cls.get_logger().info(
            "Starting refund",
            extra={
                "invoice_id": str(request.invoice_id),
                "amount": str(amount),
                "processed_by": processed_by.pk,
            },
        )

        charge = cls.resolve_charge(request.invoice_id)
        cls.check_available(charge, Decimal(request.amount))

        stripe_refund = cls.get_stripe_adapter().create_refund(
            charge_id=charge.id,
            amount_cents=cls.to_minor_units(amount),
            reason=STRIPE_REFUND_REASON,
            metadata={
                "invoice_id": str(request.invoice_id),
                "reason_from_user": request.reason,
                "processed_by": str(processed_by.pk),
                "admin_notes": request.admin_notes or "N/A",
            },
        )

        outcome = RefundOutcome(
            amount=amount,
            currency=(charge.currency or "").upper(),
            stripe_refund=stripe_refund,
        )

        try:
            with cls.atomic():
                outcome.refund = Refund.objects.create(
                    invoice_id=request.invoice_id,
                    stripe_refund_id=stripe_refund.id,
                    stripe_payment_intent_id=(
                        stripe_refund.payment_intent_id or charge.payment_intent_id
                    ),
                    amount=amount,
                    reason=request.reason,
                    status=stripe_refund.status,
                    admin_notes=request.admin_notes,
                    processed_by=processed_by,
                )
        except DatabaseError as e:
            # Money already moved at Stripe, report instead of raising
            cls.get_logger().critical(
                "Stripe refund succeeded but local record failed",
                extra={
                    "invoice_id": str(request.invoice_id),
                    "stripe_refund_id": stripe_refund.id,
                    "amount": str(amount),
                    "error": str(e),
                },
                exc_info=True,
            )
            outcome.ledger_error = str(e)
            return outcome

        cls.get_logger().info(
            "Refund completed",
            extra={
                "invoice_id": str(request.invoice_id),
                "refund_id": str(outcome.refund.id),
                "stripe_refund_id": stripe_refund.id,
                "status": stripe_refund.status,
            },
        )
        return outcome

    # =========================================================================
    # Steps
    # =========================================================================

    @classmethod
    def validate_request(cls, request: RefundRequest) -> Decimal:
        """
        Check required fields and return the amount rounded to the minor unit.

        Amounts that round to zero (e.g. 0.004) are rejected here so Stripe
        is never asked for a zero refund.
        """
        if not request.invoice_id:
            raise PaymentValidationError(
                "invoiceId is required",
                details={"invoiceId": ["This field is required."]},
            )
        if not request.reason:
            raise PaymentValidationError(
                "reason is required",
                details={"reason": ["This field is required."]},
            )
        amount = None if request.amount is None else cls.round_amount(request.amount)
        if amount is None or amount <= 0:
            raise PaymentValidationError(
                "Amount must be at least 0.01",
                details={"amount": [str(request.amount)]},
            )
        return amount

    @staticmethod
    def round_amount(amount: Decimal) -> Decimal:
        """Round half-up to the nearest minor unit."""
        return Decimal(amount).quantize(MINOR_UNIT, rounding=ROUND_HALF_UP)

    @staticmethod
    def to_minor_units(amount: Decimal) -> int:
        return int(
            (Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        )

    @classmethod
    def resolve_charge(cls, invoice_id: uuid.UUID | str) -> ChargeResult:
        """
        Find the Stripe charge behind an invoice's latest succeeded payment.

        Raises:
            ChargeNotFoundError: No succeeded payment, no Stripe reference,
                or an intent without a charge
        """
        payment = PaymentRecord.objects.latest_succeeded_for_invoice(invoice_id)
        if payment is None:
            raise ChargeNotFoundError(
                "No successful payment found for this invoice",
                details={"invoice_id": str(invoice_id)},
            )

        adapter = cls.get_stripe_adapter()
        reference = payment.processor_reference
        charge = None

        if isinstance(reference, ChargeReference):
            charge = adapter.retrieve_charge(reference.charge_id)
        elif isinstance(reference, PaymentIntentReference):
            intent = adapter.retrieve_payment_intent(
                reference.payment_intent_id,
                expand_latest_charge=True,
            )
            charge = intent.latest_charge

        if charge is None:
            raise ChargeNotFoundError(
                "No Stripe charge found for this invoice",
                details={
                    "invoice_id": str(invoice_id),
                    "payment_record_id": str(payment.id),
                },
            )

        cls.get_logger().debug(
            "Resolved charge",
            extra={
                "invoice_id": str(invoice_id),
                "charge_id": charge.id,
                "reference_type": type(reference).__name__,
            },
        )
        return charge

    @staticmethod
    def check_available(charge: ChargeResult, amount: Decimal) -> Decimal:
        """
        Ensure the charge still holds at least ``amount``.

        Returns:
            The refundable balance in major units

        Raises:
            AmountExceedsAvailableError: amount is above the balance
        """
        available = Decimal(charge.refundable_cents) / 100
        if amount > available:
            raise AmountExceedsAvailableError(
                available=available,
                requested=amount,
                currency=charge.currency or "",
            )
        return available
