"""
Factory Boy factories for authentication models.

Provides realistic test data generation for:
- User: Custom user model with email-based authentication
- Profile: Name and role, auto-created with each user

Usage:
    from authentication.tests.factories import UserFactory, AdminUserFactory

    # Create a customer
    user = UserFactory()

    # Create a user with the admin role
    admin = AdminUserFactory()

    # Create a user with a named profile
    user = UserFactory(first_name="Alex", last_name="Martin")
"""

import factory

from authentication.models import Profile, User


class UserFactory(factory.django.DjangoModelFactory):
    """
    Factory for User model.

    Creates users through UserManager.create_user(), so the Profile exists
    and first_name/last_name/role kwargs land on it.

    Examples:
        # Basic user
        user = UserFactory()

        # Verified user
        user = UserFactory(email_verified=True)

        # Inactive user (deactivated)
        user = UserFactory(is_active=False)
    """

    class Meta:
        model = User
        skip_postgeneration_save = True

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    email_verified = False
    is_active = True
    is_staff = False

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Override create to use UserManager.create_user()."""
        password = kwargs.pop("password", "TestPass123!")
        return model_class.objects.create_user(
            email=kwargs.pop("email"), password=password, **kwargs
        )


class AdminUserFactory(UserFactory):
    """User whose profile carries the admin role."""

    email = factory.Sequence(lambda n: f"admin{n}@omega.com")
    email_verified = True
    role = Profile.Role.ADMIN


class ProfileFactory(factory.django.DjangoModelFactory):
    """
    Factory for Profile model.

    Because a profile is created with every user, this factory looks the
    profile up by user and updates it.

    Examples:
        profile = ProfileFactory(user=existing_user, first_name="Alex")
    """

    class Meta:
        model = Profile
        django_get_or_create = ("user",)

    user = factory.SubFactory(UserFactory)
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    role = Profile.Role.CUSTOMER

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        profile = super()._create(model_class, *args, **kwargs)
        # get_or_create returns the signal-created row untouched
        for field in ("first_name", "last_name", "role"):
            if field in kwargs:
                setattr(profile, field, kwargs[field])
        profile.save()
        return profile
