"""
Payments app for invoices, refunds and Stripe checkout.

This app handles:
- Invoices and the payments recorded against them
- Operator refunds through Stripe, with a local Refund record
- Charge lookup for a PaymentIntent
- PaymentIntent creation for the storefront checkout

Related apps:
    - authentication: operators and customers
    - storefront: shop currency

Usage:
    from payments.services import RefundRequest, RefundService

    outcome = RefundService.process_refund(
        RefundRequest(invoice_id=invoice.id, amount=Decimal("60.00"), reason="..."),
        processed_by=request.user,
    )
"""
