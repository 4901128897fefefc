"""
Tests for payments app.

This package contains test modules for:
- test_models.py: Invoice, PaymentRecord, Refund model tests
- test_references.py: Stripe reference parsing
- test_refund_service.py: RefundService tests
- test_services.py: ChargeLookupService and CheckoutService tests
- test_views.py: API endpoint tests

Stripe adapter tests live in payments/adapters/tests/.

Usage:
    pytest app/payments/tests/
    pytest app/payments/tests/test_refund_service.py
"""
