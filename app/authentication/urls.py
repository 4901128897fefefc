"""
URL configuration for authentication app.

URL structure:
    /api/v1/auth/token/                        - Obtain JWT access/refresh pair
    /api/v1/auth/token/refresh/                - Refresh access token
    /api/v1/auth/admin/users/                  - List users (GET), set role (POST)
    /api/v1/auth/admin/users/delete/           - Delete a user (POST)
    /api/v1/auth/admin/users/reset-password/   - Send password reset link (POST)
"""

from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from authentication.views import (
    AdminDeleteUserView,
    AdminResetPasswordView,
    AdminUserListView,
)

app_name = "authentication"

urlpatterns = [
    # JWT
    path("token/", TokenObtainPairView.as_view(), name="token-obtain"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
    # Admin user management
    path("admin/users/", AdminUserListView.as_view(), name="admin-users"),
    path(
        "admin/users/delete/",
        AdminDeleteUserView.as_view(),
        name="admin-delete-user",
    ),
    path(
        "admin/users/reset-password/",
        AdminResetPasswordView.as_view(),
        name="admin-reset-password",
    ),
]
