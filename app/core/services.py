"""
Base service layer patterns for business logic encapsulation.

Services encapsulate business logic separate from views and models.
Views handle HTTP concerns, models handle data, services handle logic.

Services raise core.exceptions.BaseApplicationError subclasses for expected
failures (validation, missing records); the DRF exception handler turns them
into JSON error responses.

Usage:
    from core.services import BaseService

    class RoleService(BaseService):
        @classmethod
        def set_role(cls, user, role: str) -> Profile:
            with cls.atomic():
                profile, _ = Profile.objects.get_or_create(user=user)
                profile.role = role
                profile.save(update_fields=["role", "updated_at"])

            cls.get_logger().info(f"Role set to {role} for user {user.id}")
            return profile
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from django.db import transaction

if TYPE_CHECKING:
    from collections.abc import Generator


class BaseService:
    """
    Base class for service layer classes.

    Provides common utilities for services:
    - Logging setup per service
    - Database transaction management

    Design Notes:
        - Use @staticmethod or @classmethod (no instance state)
        - Services should be stateless
        - Collaborators (e.g. the Stripe adapter) are injected at class level
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    @contextmanager
    def atomic(cls) -> Generator[None, None, None]:
        """
        Execute operations in a database transaction.

        Thin wrapper around Django's transaction.atomic() that makes
        transaction boundaries explicit in service code. Nested use creates
        a savepoint, so a failure inside only rolls back the inner block.
        """
        with transaction.atomic():
            yield
