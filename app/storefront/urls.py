"""
URL configuration for the storefront app.

Routes:
    - GET/POST settings/ - Site settings

All routes are prefixed with /api/v1/storefront/ when included in the main URLconf.
"""

from django.urls import path

from storefront.views import SiteSettingsView

app_name = "storefront"

urlpatterns = [
    path("settings/", SiteSettingsView.as_view(), name="site-settings"),
]
