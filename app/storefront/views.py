"""
Views for storefront settings.

Endpoints:
    GET  /api/v1/storefront/settings/ - Read site settings (any signed-in user)
    POST /api/v1/storefront/settings/ - Update site settings (site admins)
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import IsSiteAdmin
from storefront.models import SiteSettings
from storefront.serializers import SiteSettingsSerializer

logger = logging.getLogger(__name__)


class SiteSettingsView(APIView):
    """
    GET: Current site settings
    POST: Partial update (site_name, contact_email, currency)

    URL: /api/v1/storefront/settings/
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAuthenticated(), IsSiteAdmin()]
        return [IsAuthenticated()]

    @extend_schema(
        summary="Get site settings",
        responses={200: SiteSettingsSerializer},
        tags=["Storefront"],
    )
    def get(self, request):
        return Response(SiteSettingsSerializer(SiteSettings.load()).data)

    @extend_schema(
        summary="Update site settings",
        request=SiteSettingsSerializer,
        responses={200: SiteSettingsSerializer},
        tags=["Storefront"],
    )
    def post(self, request):
        serializer = SiteSettingsSerializer(
            SiteSettings.load(), data=request.data, partial=True
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()

        logger.info(
            "Site settings updated",
            extra={
                "user_id": request.user.pk,
                "fields": sorted(serializer.validated_data),
            },
        )
        return Response(serializer.data)
