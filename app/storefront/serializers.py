from rest_framework import serializers

from storefront.models import SiteSettings


class SiteSettingsSerializer(serializers.ModelSerializer):
    """Site settings; POST updates are partial."""

    class Meta:
        model = SiteSettings
        fields = ["site_name", "contact_email", "currency", "updated_at"]
        read_only_fields = ["updated_at"]
