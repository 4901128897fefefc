"""
Tests for AdminUserService.

Covers role updates, user deletion (including the self-delete guard and
detaching billing rows) and password reset emails.
"""

from decimal import Decimal

import pytest
from django.contrib.auth.tokens import default_token_generator
from django.core import mail

from authentication.models import Profile, User
from authentication.services import AdminUserService
from authentication.tests.factories import UserFactory
from core.exceptions import NotFoundError, ValidationError
from payments.models import Invoice


@pytest.mark.django_db
class TestListUsers:
    def test_returns_all_users_with_profiles(self, admin_user, user):
        users = list(AdminUserService.list_users())

        assert {u.pk for u in users} == {admin_user.pk, user.pk}


@pytest.mark.django_db
class TestSetRole:
    """Tests for AdminUserService.set_role()."""

    def test_promotes_customer_to_admin(self, admin_user, user):
        profile = AdminUserService.set_role(user.pk, "admin", acting_user=admin_user)

        assert profile.role == Profile.Role.ADMIN
        assert Profile.objects.get(user=user).role == Profile.Role.ADMIN

    def test_creates_missing_profile(self, admin_user, user):
        Profile.objects.filter(user=user).delete()

        AdminUserService.set_role(user.pk, "admin", acting_user=admin_user)

        assert Profile.objects.get(user=user).role == Profile.Role.ADMIN

    def test_unknown_role_rejected(self, admin_user, user):
        with pytest.raises(ValidationError) as exc_info:
            AdminUserService.set_role(user.pk, "superuser", acting_user=admin_user)

        assert exc_info.value.error_code == "INVALID_ROLE"
        assert Profile.objects.get(user=user).role == Profile.Role.CUSTOMER

    def test_unknown_user(self, admin_user):
        with pytest.raises(NotFoundError) as exc_info:
            AdminUserService.set_role(999999, "admin", acting_user=admin_user)

        assert exc_info.value.error_code == "USER_NOT_FOUND"


@pytest.mark.django_db
class TestDeleteUser:
    """Tests for AdminUserService.delete_user()."""

    def test_deletes_user_and_profile(self, admin_user, user):
        user_id = user.pk

        email = AdminUserService.delete_user(user_id, acting_user=admin_user)

        assert email == user.email
        assert not User.objects.filter(pk=user_id).exists()
        assert not Profile.objects.filter(user_id=user_id).exists()

    def test_refuses_self_delete(self, admin_user):
        with pytest.raises(ValidationError) as exc_info:
            AdminUserService.delete_user(admin_user.pk, acting_user=admin_user)

        assert exc_info.value.error_code == "SELF_DELETE"
        assert User.objects.filter(pk=admin_user.pk).exists()

    def test_self_delete_guard_compares_as_strings(self, admin_user):
        with pytest.raises(ValidationError):
            AdminUserService.delete_user(str(admin_user.pk), acting_user=admin_user)

    def test_unknown_user(self, admin_user):
        with pytest.raises(NotFoundError):
            AdminUserService.delete_user(999999, acting_user=admin_user)

    def test_invoices_are_detached(self, admin_user, user):
        invoice = Invoice.objects.create(
            invoice_number="FAC-0001",
            customer=user,
            customer_name="Alex Martin",
            total_amount=Decimal("100.00"),
        )

        AdminUserService.delete_user(user.pk, acting_user=admin_user)

        invoice.refresh_from_db()
        assert invoice.customer is None
        assert invoice.customer_name == "Alex Martin"


@pytest.mark.django_db
class TestPasswordReset:
    """Tests for password reset links."""

    def test_link_uses_configured_template(self, user, settings):
        settings.PASSWORD_RESET_URL = "https://shop.example/reset/{uid}/{token}/"

        link = AdminUserService.build_password_reset_link(user)

        assert link.startswith("https://shop.example/reset/")
        token = link.rstrip("/").split("/")[-1]
        assert default_token_generator.check_token(user, token)

    def test_sends_email(self, admin_user):
        target = UserFactory(email="forgetful@example.com", first_name="Sam")

        AdminUserService.send_password_reset(
            "Forgetful@example.com", acting_user=admin_user
        )

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == [target.email]
        assert message.subject == "Reset your password"
        assert "Hello Sam" in message.body

    def test_unknown_email(self, admin_user):
        with pytest.raises(NotFoundError):
            AdminUserService.send_password_reset(
                "ghost@example.com", acting_user=admin_user
            )

        assert mail.outbox == []
