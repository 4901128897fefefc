"""
Admin user management services.

AdminUserService backs the admin API:
- list_users: users merged with their profiles
- set_role: upsert a role onto a user's profile
- delete_user: remove a user (never the acting admin)
- send_password_reset: email a password reset link

Related objects (invoice customer, payment record creator, refund operator)
are detached by their on_delete=SET_NULL foreign keys when a user is deleted,
so billing history survives account removal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from django.contrib.auth.tokens import default_token_generator
from django.core.mail import send_mail
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_encode

from authentication.models import Profile, User
from core.exceptions import NotFoundError, ValidationError
from core.services import BaseService

if TYPE_CHECKING:
    from django.db.models import QuerySet


class AdminUserService(BaseService):
    """Operations available to site admins on user accounts."""

    @classmethod
    def list_users(cls) -> QuerySet[User]:
        return User.objects.select_related("profile").order_by("-date_joined")

    @classmethod
    def get_user(cls, user_id) -> User:
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFoundError(
                f"User {user_id} not found",
                error_code="USER_NOT_FOUND",
                details={"user_id": str(user_id)},
            )
        return user

    @classmethod
    def set_role(cls, user_id, role: str, acting_user: User) -> Profile:
        """
        Upsert a role onto the user's profile.

        Raises:
            ValidationError: Unknown role
            NotFoundError: Unknown user
        """
        if role not in Profile.Role.values:
            raise ValidationError(
                f"Unknown role '{role}'",
                error_code="INVALID_ROLE",
                details={"role": role, "allowed": list(Profile.Role.values)},
            )

        user = cls.get_user(user_id)

        with cls.atomic():
            profile, _ = Profile.objects.get_or_create(user=user)
            previous_role = profile.role
            profile.role = role
            profile.save(update_fields=["role", "updated_at"])

        cls.get_logger().info(
            "User role updated",
            extra={
                "user_id": user.pk,
                "previous_role": previous_role,
                "role": role,
                "acting_user_id": acting_user.pk,
            },
        )
        return profile

    @classmethod
    def delete_user(cls, user_id, acting_user: User) -> str:
        """
        Delete a user and their profile.

        Returns:
            The deleted user's email

        Raises:
            ValidationError: Admin tried to delete their own account
            NotFoundError: Unknown user
        """
        if str(user_id) == str(acting_user.pk):
            raise ValidationError(
                "You cannot delete your own account",
                error_code="SELF_DELETE",
            )

        user = cls.get_user(user_id)
        email = user.email

        with cls.atomic():
            user.delete()

        cls.get_logger().warning(
            "User deleted by admin",
            extra={
                "deleted_user_id": str(user_id),
                "acting_user_id": acting_user.pk,
            },
        )
        return email

    @classmethod
    def build_password_reset_link(cls, user: User) -> str:
        uid = urlsafe_base64_encode(force_bytes(user.pk))
        token = default_token_generator.make_token(user)
        return settings.PASSWORD_RESET_URL.format(uid=uid, token=token)

    @classmethod
    def send_password_reset(cls, email: str, acting_user: User) -> None:
        """
        Email a password reset link to the user with this address.

        Raises:
            NotFoundError: No user has this email
        """
        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            raise NotFoundError(
                f"No user with email {email}",
                error_code="USER_NOT_FOUND",
                details={"email": email},
            )

        link = cls.build_password_reset_link(user)
        send_mail(
            subject="Reset your password",
            message=(
                f"Hello {user.display_name},\n\n"
                f"Use the link below to choose a new password:\n{link}\n\n"
                "If you did not request this, you can ignore this email."
            ),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[user.email],
        )

        cls.get_logger().info(
            "Password reset link sent",
            extra={"user_id": user.pk, "acting_user_id": acting_user.pk},
        )
