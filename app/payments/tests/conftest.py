"""
Pytest fixtures for payment tests.

This module provides invoices with payment records in each shape the
refund flow handles, and a mock Stripe adapter injected into every
payment service.

Usage:
    def test_refund(stripe_adapter, charge_payment, operator):
        stripe_adapter.retrieve_charge.return_value = make_charge_result()
        ...
"""

from unittest.mock import MagicMock

import pytest

from authentication.tests.factories import UserFactory
from payments.services import ChargeLookupService, CheckoutService, RefundService
from payments.tests.factories import (
    InvoiceFactory,
    PaymentRecordFactory,
    make_charge_result,
    make_intent_result,
    make_refund_result,
)


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def operator(db):
    """Signed-in back-office user issuing refunds."""
    return UserFactory(email="operator@omega.com", email_verified=True)


@pytest.fixture
def operator_client(authenticated_client_factory, operator):
    return authenticated_client_factory(operator)


# =============================================================================
# Invoice / Payment Fixtures
# =============================================================================


@pytest.fixture
def invoice(db):
    return InvoiceFactory()


@pytest.fixture
def charge_payment(invoice):
    """Succeeded payment that stored the Stripe charge ID."""
    return PaymentRecordFactory(
        invoice=invoice,
        reference="pi_test_123",
        stripe_charge_id="ch_test_123",
    )


@pytest.fixture
def intent_payment(invoice):
    """Succeeded payment that only stored the PaymentIntent ID."""
    return PaymentRecordFactory(invoice=invoice, reference="pi_test_123")


# =============================================================================
# Stripe Adapter Fixtures
# =============================================================================


@pytest.fixture
def stripe_adapter():
    """
    Mock Stripe adapter injected into every payment service.

    Defaults to a 100.00 EUR charge with nothing refunded and a
    successful 60.00 refund.
    """
    adapter = MagicMock()
    charge = make_charge_result()
    adapter.retrieve_charge.return_value = charge
    adapter.retrieve_payment_intent.return_value = make_intent_result(
        latest_charge=charge
    )
    adapter.create_refund.return_value = make_refund_result()
    adapter.create_payment_intent.return_value = make_intent_result(
        id="pi_checkout_1", status="requires_payment_method"
    )

    services = (RefundService, ChargeLookupService, CheckoutService)
    for service in services:
        service.set_stripe_adapter(adapter)
    try:
        yield adapter
    finally:
        for service in services:
            service.set_stripe_adapter(None)
