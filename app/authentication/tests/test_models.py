"""
Tests for authentication models.

Covers:
- User defaults and name helpers
- display_name fallback chain used by the admin user list
- Profile auto-creation, role and full_name
"""

import pytest
from django.db import IntegrityError

from authentication.models import Profile, User
from authentication.tests.factories import UserFactory


@pytest.mark.django_db
class TestUserModel:
    """Tests for the User model."""

    def test_user_email_must_be_unique(self, user):
        with pytest.raises(IntegrityError):
            User.objects.create_user(email=user.email, password="x")

    def test_user_defaults(self):
        user = UserFactory()

        assert user.email_verified is False
        assert user.is_active is True
        assert user.is_staff is False
        assert user.date_joined is not None

    def test_str_returns_email(self, user):
        assert str(user) == user.email

    def test_get_full_name_uses_profile(self):
        user = UserFactory(first_name="Alex", last_name="Martin")
        assert user.get_full_name() == "Alex Martin"

    def test_get_full_name_falls_back_to_email(self):
        user = UserFactory(email="nobody@example.com")
        assert user.get_full_name() == "nobody@example.com"

    def test_get_short_name_falls_back_to_email_local_part(self):
        user = UserFactory(email="short@example.com")
        assert user.get_short_name() == "short"


@pytest.mark.django_db
class TestDisplayName:
    """display_name: full name, first name, email local part, "User"."""

    def test_full_name_wins(self):
        user = UserFactory(first_name="Alex", last_name="Martin")
        assert user.display_name == "Alex Martin"

    def test_first_name_only(self):
        user = UserFactory(first_name="Alex")
        assert user.display_name == "Alex"

    def test_email_local_part(self):
        user = UserFactory(email="camille.dupont@example.com")
        assert user.display_name == "camille.dupont"

    def test_without_profile(self):
        user = UserFactory(email="noprofile@example.com")
        Profile.objects.filter(user=user).delete()
        user = User.objects.get(pk=user.pk)

        assert user.display_name == "noprofile"

    def test_generic_label_without_email(self):
        user = User(email="")
        assert user.display_name == "User"


@pytest.mark.django_db
class TestProfileModel:
    """Tests for the Profile model."""

    def test_profile_created_with_user(self):
        user = UserFactory()

        profile = Profile.objects.get(user=user)
        assert profile.role == Profile.Role.CUSTOMER
        assert profile.first_name == ""

    def test_profile_user_is_primary_key(self, user):
        assert user.profile.pk == user.pk

    def test_profile_deleted_with_user(self, user):
        user_id = user.pk
        user.delete()

        assert not Profile.objects.filter(user_id=user_id).exists()

    def test_full_name_strips_missing_parts(self):
        user = UserFactory(last_name="Martin")
        assert user.profile.full_name == "Martin"

    def test_is_admin(self, admin_user, user):
        assert admin_user.profile.is_admin is True
        assert user.profile.is_admin is False

    def test_str_uses_full_name_or_user(self):
        named = UserFactory(first_name="Alex", last_name="Martin")
        unnamed = UserFactory(email="plain@example.com")

        assert str(named.profile) == "Alex Martin"
        assert str(unnamed.profile) == "plain@example.com"
