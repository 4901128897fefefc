"""
Processor references stored on payment records.

A payment record points at Stripe in one of two ways, depending on which
checkout flow wrote it:

- ChargeReference: the charge ID (ch_xxx) was stored directly
- PaymentIntentReference: only the PaymentIntent ID (pi_xxx) was stored;
  the charge has to be resolved through the intent's latest_charge

parse_processor_reference() is the only place that inspects ID prefixes.
Everything downstream dispatches on the reference type.

Usage:
    from payments.references import ChargeReference, parse_processor_reference

    ref = parse_processor_reference(
        charge_id=record.stripe_charge_id,
        reference=record.reference,
    )
    if isinstance(ref, ChargeReference):
        charge = adapter.retrieve_charge(ref.charge_id)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

CHARGE_PREFIX = "ch_"
PAYMENT_INTENT_PREFIX = "pi_"


@dataclass(frozen=True)
class ChargeReference:
    """Stripe Charge ID stored directly on the payment record."""

    charge_id: str


@dataclass(frozen=True)
class PaymentIntentReference:
    """Stripe PaymentIntent ID whose latest charge must be resolved."""

    payment_intent_id: str


ProcessorReference = Union[ChargeReference, PaymentIntentReference]


def is_payment_intent_id(value: str | None) -> bool:
    return bool(value) and value.startswith(PAYMENT_INTENT_PREFIX)


def is_charge_id(value: str | None) -> bool:
    return bool(value) and value.startswith(CHARGE_PREFIX)


def parse_processor_reference(
    charge_id: str | None,
    reference: str | None,
) -> ProcessorReference | None:
    """
    Classify the stored Stripe identifiers of a payment record.

    A charge ID wins over an intent ID: checked first in the dedicated
    charge column, then in the free-form reference column (manual entries).

    Args:
        charge_id: Value of the stripe_charge_id column
        reference: Value of the reference column

    Returns:
        ChargeReference, PaymentIntentReference, or None when neither
        value looks like a Stripe ID
    """
    if is_charge_id(charge_id):
        return ChargeReference(charge_id=charge_id)
    if is_charge_id(reference):
        return ChargeReference(charge_id=reference)
    if is_payment_intent_id(reference):
        return PaymentIntentReference(payment_intent_id=reference)
    return None
