"""
Test configuration and fixtures for authentication tests.

This module provides:
- User fixtures for each access level
- Authenticated API clients

Usage:
    def test_example(admin_client):
        response = admin_client.get('/api/v1/auth/admin/users/')
        assert response.status_code == 200
"""

import pytest

from authentication.tests.factories import AdminUserFactory, UserFactory


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def user(db):
    """Create a basic verified customer with auto-created profile."""
    return UserFactory(email_verified=True)


@pytest.fixture
def admin_user(db):
    """Create a user whose profile role is admin."""
    return AdminUserFactory(first_name="Ada", last_name="Admin")


@pytest.fixture
def allowlisted_user(db, settings):
    """Create a customer whose email is in ADMIN_EMAILS."""
    settings.ADMIN_EMAILS = ["owner@omega.com"]
    return UserFactory(email="owner@omega.com")


@pytest.fixture
def deactivated_user(db):
    """Create a deactivated user (is_active=False)."""
    return UserFactory(is_active=False)


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def authenticated_client(authenticated_client_factory, user):
    """API client authenticated as the default customer."""
    return authenticated_client_factory(user)


@pytest.fixture
def admin_client(authenticated_client_factory, admin_user):
    """API client authenticated as an admin-role user."""
    return authenticated_client_factory(admin_user)
