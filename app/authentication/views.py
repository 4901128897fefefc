"""
Views for the admin user management API.

Endpoints (all require a bearer token and site admin access):
    GET  /api/v1/auth/admin/users/                - List users with profiles
    POST /api/v1/auth/admin/users/                - Update a user's role
    POST /api/v1/auth/admin/users/delete/         - Delete a user
    POST /api/v1/auth/admin/users/reset-password/ - Email a password reset link

Site admin means: email in settings.ADMIN_EMAILS, or Profile.role == "admin".
"""

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import IsSiteAdmin
from authentication.serializers import (
    AdminUserSerializer,
    PasswordResetRequestSerializer,
    RoleUpdateSerializer,
    UserIdSerializer,
)
from authentication.services import AdminUserService


class AdminUserListView(APIView):
    """
    GET: List every user merged with their profile
    POST: Upsert a role onto a user's profile

    URL: /api/v1/auth/admin/users/
    """

    permission_classes = [IsAuthenticated, IsSiteAdmin]

    @extend_schema(
        summary="List users",
        responses={200: AdminUserSerializer(many=True)},
        tags=["Admin"],
    )
    def get(self, request):
        users = AdminUserService.list_users()
        return Response({"users": AdminUserSerializer(users, many=True).data})

    @extend_schema(
        summary="Update user role",
        request=RoleUpdateSerializer,
        tags=["Admin"],
    )
    def post(self, request):
        serializer = RoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        AdminUserService.set_role(
            user_id=serializer.validated_data["userId"],
            role=serializer.validated_data["role"],
            acting_user=request.user,
        )
        return Response({"success": True})


class AdminDeleteUserView(APIView):
    """
    POST: Delete a user account (not your own)

    URL: /api/v1/auth/admin/users/delete/
    """

    permission_classes = [IsAuthenticated, IsSiteAdmin]

    @extend_schema(
        summary="Delete user",
        request=UserIdSerializer,
        tags=["Admin"],
    )
    def post(self, request):
        serializer = UserIdSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = AdminUserService.delete_user(
            user_id=serializer.validated_data["userId"],
            acting_user=request.user,
        )
        return Response(
            {"success": True, "message": f"User {email} deleted successfully"}
        )


class AdminResetPasswordView(APIView):
    """
    POST: Send a password reset link to a user

    URL: /api/v1/auth/admin/users/reset-password/
    """

    permission_classes = [IsAuthenticated, IsSiteAdmin]

    @extend_schema(
        summary="Send password reset link",
        request=PasswordResetRequestSerializer,
        tags=["Admin"],
    )
    def post(self, request):
        serializer = PasswordResetRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        AdminUserService.send_password_reset(email, acting_user=request.user)
        return Response(
            {"success": True, "message": f"Password reset email sent to {email}"}
        )
