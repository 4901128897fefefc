"""
Tests for the site settings endpoint.

Tests cover:
- GET for any signed-in user
- POST restricted to site admins
- Partial updates and validation
"""

import pytest
from django.urls import reverse
from rest_framework import status

from storefront.models import SiteSettings

URL = reverse("storefront:site-settings")


@pytest.mark.django_db
class TestGetSiteSettings:
    def test_requires_authentication(self, api_client):
        response = api_client.get(URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_customer_can_read(self, customer_client):
        response = customer_client.get(URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["site_name"] == "OMEGA"
        assert response.data["contact_email"] == "contact@omega.com"
        assert response.data["currency"] == "EUR"


@pytest.mark.django_db
class TestUpdateSiteSettings:
    def test_customer_forbidden(self, customer_client):
        response = customer_client.post(URL, {"site_name": "Hacked"}, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {"error": "Admin access required."}
        assert SiteSettings.load().site_name == "OMEGA"

    def test_admin_partial_update(self, site_admin_client):
        response = site_admin_client.post(URL, {"currency": "GBP"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["currency"] == "GBP"
        site = SiteSettings.load()
        assert site.currency == "GBP"
        assert site.site_name == "OMEGA"

    def test_allowlisted_email_can_update(
        self, authenticated_client_factory, customer, settings
    ):
        settings.ADMIN_EMAILS = [customer.email.lower()]
        client = authenticated_client_factory(customer)

        response = client.post(URL, {"site_name": "Omega Store"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert SiteSettings.load().site_name == "Omega Store"

    def test_invalid_currency(self, site_admin_client):
        response = site_admin_client.post(URL, {"currency": "JPY"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error"] == "Invalid request."
        assert "currency" in response.data["details"]

    def test_invalid_email(self, site_admin_client):
        response = site_admin_client.post(
            URL, {"contact_email": "not-an-email"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
