"""
Custom user manager for email-based authentication.

Related files:
    - models.py: User model that uses this manager
    - signals.py: Creates the Profile that profile fields are written to
"""

from django.contrib.auth.models import BaseUserManager

# Keyword arguments accepted by create_user() that belong on Profile
PROFILE_FIELDS = ("first_name", "last_name", "role")


class UserManager(BaseUserManager):
    """
    Custom manager for User model with email-based authentication.

    Usage:
        user = User.objects.create_user(
            email="operator@omega.com",
            password="securepassword",
            first_name="Alex",
            role="admin",
        )
    """

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save a regular user with the given email and password.

        first_name, last_name and role are written to the auto-created
        Profile rather than the User row.

        Raises:
            ValueError: If email is not provided
        """
        if not email:
            raise ValueError("The Email field must be set")

        email = self.normalize_email(email)

        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)

        profile_fields = {
            name: extra_fields.pop(name)
            for name in PROFILE_FIELDS
            if name in extra_fields
        }

        user = self.model(email=email, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)

        if profile_fields:
            profile = user.profile
            for name, value in profile_fields.items():
                setattr(profile, name, value)
            profile.save(update_fields=[*profile_fields, "updated_at"])

        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a superuser with the given email and password.

        Superusers also get the admin role so they can use the admin API.

        Raises:
            ValueError: If is_staff or is_superuser is not True
        """
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("email_verified", True)
        extra_fields.setdefault("role", "admin")

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, password, **extra_fields)
