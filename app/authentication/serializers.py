"""
Serializers for the authentication and admin user endpoints.

Request bodies use the camelCase keys sent by the storefront admin
(userId, role, email); responses use snake_case.

Related files:
    - views.py: Views that use these serializers
    - services.py: AdminUserService
"""

from rest_framework import serializers

from authentication.models import Profile, User


class ProfileSerializer(serializers.ModelSerializer):
    """Profile row as embedded in the admin user list."""

    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Profile
        fields = [
            "first_name",
            "last_name",
            "full_name",
            "role",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdminUserSerializer(serializers.ModelSerializer):
    """
    User merged with its profile for the admin user list.

    role falls back to "customer" and profile to null for accounts that
    have no profile row.
    """

    display_name = serializers.CharField(read_only=True)
    role = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField(source="date_joined", read_only=True)
    last_sign_in_at = serializers.DateTimeField(source="last_login", read_only=True)
    profile = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "display_name",
            "role",
            "created_at",
            "email_verified",
            "last_sign_in_at",
            "profile",
        ]
        read_only_fields = fields

    def _get_profile(self, obj):
        try:
            return obj.profile
        except Profile.DoesNotExist:
            return None

    def get_role(self, obj) -> str:
        profile = self._get_profile(obj)
        return profile.role if profile else Profile.Role.CUSTOMER.value

    def get_profile(self, obj):
        profile = self._get_profile(obj)
        return ProfileSerializer(profile).data if profile else None


class RoleUpdateSerializer(serializers.Serializer):
    userId = serializers.IntegerField()
    role = serializers.CharField(max_length=20)


class UserIdSerializer(serializers.Serializer):
    userId = serializers.IntegerField()


class PasswordResetRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
