"""
Payment domain models.

- Invoice: Amount billed to a customer
- PaymentRecord: One payment attempt against an invoice (Stripe or offline)
- Refund: Money returned through Stripe, recorded after the fact
"""

from payments.models.invoice import Invoice
from payments.models.payment_record import PaymentRecord
from payments.models.refund import Refund

__all__ = [
    "Invoice",
    "PaymentRecord",
    "Refund",
]
