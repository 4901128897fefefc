"""
Tests for the site admin permission.

Access is granted by either the ADMIN_EMAILS allow-list or the admin role.
"""

import pytest
from django.contrib.auth.models import AnonymousUser
from rest_framework.test import APIRequestFactory

from authentication.permissions import IsSiteAdmin, is_site_admin
from authentication.tests.factories import UserFactory


@pytest.mark.django_db
class TestIsSiteAdmin:
    """Tests for is_site_admin() and IsSiteAdmin."""

    def test_customer_is_not_admin(self, user, settings):
        settings.ADMIN_EMAILS = []
        assert is_site_admin(user) is False

    def test_admin_role_grants_access(self, admin_user, settings):
        settings.ADMIN_EMAILS = []
        assert is_site_admin(admin_user) is True

    def test_allowlisted_email_grants_access(self, allowlisted_user):
        assert allowlisted_user.profile.role == "customer"
        assert is_site_admin(allowlisted_user) is True

    def test_allowlist_match_is_case_insensitive(self, settings):
        settings.ADMIN_EMAILS = ["owner@omega.com"]
        user = UserFactory(email="Owner@omega.com")

        assert is_site_admin(user) is True

    def test_anonymous_is_not_admin(self):
        assert is_site_admin(AnonymousUser()) is False

    def test_permission_class_uses_request_user(self, admin_user, user):
        request = APIRequestFactory().get("/")
        permission = IsSiteAdmin()

        request.user = admin_user
        assert permission.has_permission(request, None) is True

        request.user = user
        assert permission.has_permission(request, None) is False
        assert permission.message == "Admin access required."
