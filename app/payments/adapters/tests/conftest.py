"""
Pytest fixtures for Stripe adapter tests.

Sections:
    - Mock Stripe Response Fixtures
    - Mock Stripe Error Fixtures
    - Mock Stripe Client Fixtures
"""

from dataclasses import dataclass
from typing import Any
from unittest.mock import patch

import pytest
import stripe


# =============================================================================
# Mock Stripe Response Fixtures
# =============================================================================


@dataclass
class MockStripeObject:
    """Mock Stripe API object with to_dict support. Missing keys read as None."""

    data: dict[str, Any]

    def __getattr__(self, name: str) -> Any:
        if name == "data":
            return self.__dict__["data"]
        return self.data.get(name)

    def to_dict(self) -> dict[str, Any]:
        return self.data


def make_charge(
    id: str = "ch_test123456",
    amount: int = 10000,
    amount_refunded: int = 0,
    currency: str = "eur",
    status: str = "succeeded",
    payment_intent: str | None = "pi_test123456",
) -> MockStripeObject:
    return MockStripeObject(
        {
            "id": id,
            "object": "charge",
            "amount": amount,
            "amount_refunded": amount_refunded,
            "currency": currency,
            "status": status,
            "payment_intent": payment_intent,
        }
    )


def make_payment_intent(
    id: str = "pi_test123456",
    status: str = "succeeded",
    amount: int = 10000,
    currency: str = "eur",
    client_secret: str = "pi_test123456_secret_abc123",
    latest_charge: Any = None,
    metadata: dict | None = None,
) -> MockStripeObject:
    return MockStripeObject(
        {
            "id": id,
            "object": "payment_intent",
            "status": status,
            "amount": amount,
            "currency": currency,
            "client_secret": client_secret,
            "latest_charge": latest_charge,
            "metadata": metadata or {},
        }
    )


def make_refund(
    id: str = "re_test123456",
    amount: int = 6000,
    currency: str = "eur",
    status: str = "succeeded",
    charge: str = "ch_test123456",
    payment_intent: str | None = "pi_test123456",
    metadata: dict | None = None,
) -> MockStripeObject:
    return MockStripeObject(
        {
            "id": id,
            "object": "refund",
            "amount": amount,
            "currency": currency,
            "status": status,
            "charge": charge,
            "payment_intent": payment_intent,
            "metadata": metadata or {},
        }
    )


@pytest.fixture
def mock_charge():
    """Factory for mock Charge responses."""
    return make_charge


@pytest.fixture
def mock_payment_intent():
    """Factory for mock PaymentIntent responses."""
    return make_payment_intent


@pytest.fixture
def mock_refund():
    """Factory for mock Refund responses."""
    return make_refund


# =============================================================================
# Mock Stripe Error Fixtures
# =============================================================================


@pytest.fixture
def card_error():
    """Create a Stripe CardError."""
    error = stripe.CardError(
        message="Your card was declined.",
        param=None,
        code="card_declined",
    )
    error.decline_code = "generic_decline"
    return error


@pytest.fixture
def invalid_request_error():
    """Create a Stripe InvalidRequestError for a missing resource."""
    return stripe.InvalidRequestError(
        message="No such charge: 'ch_missing'",
        param="id",
        code="resource_missing",
    )


@pytest.fixture
def rate_limit_error():
    return stripe.RateLimitError(
        message="Too many requests hit the API too quickly.",
    )


@pytest.fixture
def api_connection_error():
    return stripe.APIConnectionError(
        message="Could not connect to Stripe.",
    )


@pytest.fixture
def api_error():
    return stripe.APIError(
        message="Something went wrong on Stripe's end.",
    )


@pytest.fixture
def authentication_error():
    return stripe.AuthenticationError(
        message="Invalid API Key provided.",
    )


# =============================================================================
# Mock Stripe Client Fixtures
# =============================================================================


@pytest.fixture
def mock_stripe_payment_intent():
    """Mock stripe.PaymentIntent API."""
    with patch("stripe.PaymentIntent") as mock:
        mock.create.return_value = make_payment_intent(status="requires_payment_method")
        mock.retrieve.return_value = make_payment_intent(latest_charge="ch_test123456")
        yield mock


@pytest.fixture
def mock_stripe_charge():
    """Mock stripe.Charge API."""
    with patch("stripe.Charge") as mock:
        mock.retrieve.return_value = make_charge()
        yield mock


@pytest.fixture
def mock_stripe_refund():
    """Mock stripe.Refund API."""
    with patch("stripe.Refund") as mock:
        mock.create.return_value = make_refund()
        yield mock


@pytest.fixture
def mock_stripe_http_client():
    """Mock stripe.RequestsClient so no real HTTP client is built."""
    from payments.adapters import StripeAdapter

    StripeAdapter._http_client = None
    StripeAdapter._http_client_timeout = None
    with patch("stripe.RequestsClient") as mock:
        yield mock
    StripeAdapter._http_client = None
    StripeAdapter._http_client_timeout = None
