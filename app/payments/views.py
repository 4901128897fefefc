"""
DRF views for payments app.

This module provides API views for:
- Operator refunds against an invoice's latest payment
- Charge ID lookup for a PaymentIntent
- Storefront PaymentIntent creation

Related files:
    - services/: Business logic and Stripe calls
    - serializers.py: Request serializers
    - urls.py: URL routing

Endpoints:
    POST /api/v1/payments/refunds/         - Refund an invoice payment
    POST /api/v1/payments/charge-id/       - Charge ID behind a PaymentIntent
    POST /api/v1/payments/payment-intents/ - Create a checkout PaymentIntent

Security:
    - Refund and charge lookup require a bearer token
    - PaymentIntent creation is public (storefront checkout)
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from payments.serializers import (
    ChargeIdRequestSerializer,
    PaymentIntentCreateSerializer,
    RefundRequestSerializer,
)
from payments.services import (
    ChargeLookupService,
    CheckoutService,
    RefundRequest,
    RefundService,
)

logger = logging.getLogger(__name__)


class RefundView(APIView):
    """
    Refund part or all of an invoice's latest succeeded payment.

    POST /api/v1/payments/refunds/

    Returns:
        200 {"message"} when refunded and recorded
        207 {"message", "error"} when refunded at Stripe but not recorded
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Refund invoice payment",
        request=RefundRequestSerializer,
        responses={
            200: OpenApiResponse(description="Refund processed"),
            207: OpenApiResponse(description="Refunded, local record failed"),
            400: OpenApiResponse(description="Invalid request or amount too high"),
            404: OpenApiResponse(description="No charge found for the invoice"),
        },
        tags=["Payments"],
    )
    def post(self, request):
        serializer = RefundRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        outcome = RefundService.process_refund(
            RefundRequest(
                invoice_id=data["invoiceId"],
                amount=data["amount"],
                reason=data["reason"],
                admin_notes=data.get("adminNotes") or None,
            ),
            processed_by=request.user,
        )

        refunded = f"{outcome.amount:.2f} {outcome.currency}".strip()

        if outcome.is_partial:
            return Response(
                {
                    "message": (
                        f"Stripe refund of {refunded} completed, but saving the "
                        "local refund record failed. Record it manually."
                    ),
                    "error": outcome.ledger_error,
                },
                status=status.HTTP_207_MULTI_STATUS,
            )

        return Response({"message": f"Refund of {refunded} processed successfully."})


class ChargeIdView(APIView):
    """
    Look up the charge ID behind a PaymentIntent.

    POST /api/v1/payments/charge-id/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get charge ID for a payment intent",
        request=ChargeIdRequestSerializer,
        tags=["Payments"],
    )
    def post(self, request):
        serializer = ChargeIdRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        charge_id = ChargeLookupService.get_charge_id(
            serializer.validated_data["paymentIntentId"]
        )
        return Response({"chargeId": charge_id})


class CreatePaymentIntentView(APIView):
    """
    Create a PaymentIntent for storefront checkout.

    POST /api/v1/payments/payment-intents/

    Returns:
        {"client_secret", "payment_intent_id"}
    """

    permission_classes = [AllowAny]

    @extend_schema(
        summary="Create checkout payment intent",
        request=PaymentIntentCreateSerializer,
        tags=["Payments"],
    )
    def post(self, request):
        serializer = PaymentIntentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        intent = CheckoutService.create_payment_intent(
            amount_cents=serializer.validated_data["amount"],
            currency=serializer.validated_data["currency"],
        )
        return Response(
            {
                "client_secret": intent.client_secret,
                "payment_intent_id": intent.id,
            }
        )
