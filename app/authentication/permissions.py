"""
Permission classes for the admin API.

A user is a site admin when either:
- their email is listed in settings.ADMIN_EMAILS, or
- their Profile.role is "admin".
"""

from django.conf import settings
from rest_framework.permissions import BasePermission


def is_site_admin(user) -> bool:
    """Return True when the user passes the allow-list or role check."""
    if not user or not user.is_authenticated:
        return False

    if user.email and user.email.lower() in settings.ADMIN_EMAILS:
        return True

    # Imported here to keep this module importable before apps are ready
    from authentication.models import Profile

    return Profile.objects.filter(user=user, role=Profile.Role.ADMIN).exists()


class IsSiteAdmin(BasePermission):
    """Allow access only to site admins (see is_site_admin)."""

    message = "Admin access required."

    def has_permission(self, request, view):
        return is_site_admin(request.user)
