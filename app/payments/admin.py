"""
Payment admin configuration.

Registers invoices, payment records and refunds with the Django admin.
Refunds are read-only: they mirror refunds already issued at Stripe.
"""

from django.contrib import admin

from payments.models import Invoice, PaymentRecord, Refund


class PaymentRecordInline(admin.TabularInline):
    model = PaymentRecord
    extra = 0
    fields = ["amount", "payment_method", "status", "reference", "stripe_charge_id"]
    readonly_fields = ["created_at"]
    show_change_link = True


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    """Admin configuration for Invoice."""

    list_display = [
        "invoice_number",
        "customer_name",
        "status",
        "total_display",
        "amount_paid",
        "created_at",
    ]
    list_filter = ["status", "currency", "created_at"]
    search_fields = ["invoice_number", "customer_name", "customer_email", "id"]
    readonly_fields = ["id", "created_at", "updated_at"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]
    inlines = [PaymentRecordInline]

    fieldsets = (
        (
            None,
            {
                "fields": ("id", "invoice_number", "status"),
            },
        ),
        (
            "Customer",
            {
                "fields": ("customer", "customer_name", "customer_email"),
            },
        ),
        (
            "Amounts",
            {
                "fields": ("total_amount", "amount_paid", "currency"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
            },
        ),
    )

    def total_display(self, obj: Invoice) -> str:
        """Display the total formatted with its currency."""
        return f"{obj.total_amount:.2f} {obj.currency.upper()}"

    total_display.short_description = "Total"


@admin.register(PaymentRecord)
class PaymentRecordAdmin(admin.ModelAdmin):
    """Admin configuration for PaymentRecord."""

    list_display = [
        "id",
        "invoice",
        "amount",
        "payment_method",
        "status",
        "reference",
        "created_at",
    ]
    list_filter = ["status", "payment_method", "created_at"]
    search_fields = ["id", "reference", "stripe_charge_id", "invoice__invoice_number"]
    readonly_fields = ["id", "created_at", "updated_at"]
    raw_id_fields = ["invoice", "created_by"]
    ordering = ["-created_at"]


@admin.register(Refund)
class RefundAdmin(admin.ModelAdmin):
    """
    Admin configuration for Refund.

    Rows are created by the refund API after Stripe confirms; editing or
    deleting them here would desync the local copy from Stripe.
    """

    list_display = [
        "id",
        "invoice",
        "amount",
        "status",
        "stripe_refund_id",
        "processed_by",
        "created_at",
    ]
    list_filter = ["status", "created_at"]
    search_fields = [
        "id",
        "stripe_refund_id",
        "stripe_payment_intent_id",
        "invoice__invoice_number",
    ]
    readonly_fields = [
        "id",
        "invoice",
        "stripe_refund_id",
        "stripe_payment_intent_id",
        "amount",
        "reason",
        "status",
        "admin_notes",
        "processed_by",
        "created_at",
        "updated_at",
    ]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]

    def has_add_permission(self, request) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        """Disable delete for refunds (audit trail)."""
        return False
