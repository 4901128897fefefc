"""
URL configuration for the payments app.

Routes:
    - POST refunds/         - Refund an invoice payment
    - POST charge-id/       - Charge ID behind a PaymentIntent
    - POST payment-intents/ - Create a checkout PaymentIntent

All routes are prefixed with /api/v1/payments/ when included in the main URLconf.
"""

from django.urls import path

from payments.views import ChargeIdView, CreatePaymentIntentView, RefundView

app_name = "payments"

urlpatterns = [
    path("refunds/", RefundView.as_view(), name="refunds"),
    path("charge-id/", ChargeIdView.as_view(), name="charge-id"),
    path(
        "payment-intents/",
        CreatePaymentIntentView.as_view(),
        name="payment-intents",
    ),
]
