"""Fixtures for storefront tests."""

import pytest

from authentication.tests.factories import AdminUserFactory, UserFactory


@pytest.fixture
def customer(db):
    return UserFactory(email_verified=True)


@pytest.fixture
def site_admin(db):
    return AdminUserFactory()


@pytest.fixture
def customer_client(authenticated_client_factory, customer):
    return authenticated_client_factory(customer)


@pytest.fixture
def site_admin_client(authenticated_client_factory, site_admin):
    return authenticated_client_factory(site_admin)
