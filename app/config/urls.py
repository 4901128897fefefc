"""
URL configuration for the OMEGA billing backend.

URL Structure:
    /                              - ReDoc API documentation
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint (for load balancers, Docker)
    /schema/                       - OpenAPI schema (YAML)
    /api/v1/auth/                  - Authentication endpoints
        token/                     - Obtain JWT access/refresh pair
        token/refresh/             - Refresh access token
        admin/users/               - List users (GET), update a role (POST)
        admin/users/delete/        - Delete a user (POST)
        admin/users/reset-password/ - Send a password reset link (POST)
    /api/v1/payments/              - Payment endpoints
        payment-intents/           - Create a checkout payment intent (POST)
        charge-id/                 - Resolve the charge behind a payment intent (POST)
        refunds/                   - Refund an invoice payment (POST)
    /api/v1/storefront/            - Storefront endpoints
        settings/                  - Read (GET) or update (POST) site settings

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

from core.views import health_check

# =============================================================================
# API v1 Routes
# =============================================================================
api_v1_patterns = [
    path("auth/", include("authentication.urls")),
    path("payments/", include("payments.urls")),
    path("storefront/", include("storefront.urls")),
]

urlpatterns = [
    # Documentation
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # API v1
    path("api/v1/", include(api_v1_patterns)),
]

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "OMEGA Admin"
admin.site.site_title = "OMEGA Admin Portal"
admin.site.index_title = "Billing and users"
