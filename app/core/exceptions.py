"""
Base exception classes for application-wide error handling.

This module provides a standardized exception hierarchy that enables:
- Consistent error responses across the application
- Machine-readable error codes for client handling
- Detailed error information for debugging

Exception Hierarchy:
    BaseApplicationError (base, HTTP 500)
    ├── ValidationError - Input validation failures (HTTP 400)
    ├── NotFoundError - Resource not found (HTTP 404)
    └── PermissionDeniedError - Authorization failures (HTTP 403)

The DRF exception handler at the bottom of this module renders every error
raised from an API view as a JSON body with an "error" key:

    {"error": "Invoice not found", "error_code": "NOT_FOUND", "details": {...}}

Usage:
    from core.exceptions import ValidationError, NotFoundError

    # Raise with message only
    raise ValidationError("Invalid email format")

    # Raise with error code and details
    raise NotFoundError(
        "User not found",
        error_code="USER_NOT_FOUND",
        details={"user_id": 42},
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Provides a consistent interface for error handling across the application.
    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, metadata, etc.)
        status_code: HTTP status used when the error reaches an API view
    """

    default_error_code: str = "APPLICATION_ERROR"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dict with error, error_code, and (when present) details keys
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation fails.

    Use for:
    - Missing required fields
    - Out-of-range values (negative amounts, unknown roles)
    - Business rule violations (deleting your own account)

    Example:
        raise ValidationError(
            "userId and role are required",
            details={"role": ["This field is required."]},
        )
    """

    default_error_code: str = "VALIDATION_ERROR"
    status_code: int = status.HTTP_400_BAD_REQUEST


class NotFoundError(BaseApplicationError):
    """
    Raised when a requested resource is not found.

    Example:
        user = User.objects.filter(id=user_id).first()
        if not user:
            raise NotFoundError(
                f"User with ID {user_id} not found",
                error_code="USER_NOT_FOUND",
                details={"user_id": user_id}
            )
    """

    default_error_code: str = "NOT_FOUND"
    status_code: int = status.HTTP_404_NOT_FOUND


class PermissionDeniedError(BaseApplicationError):
    """
    Raised when user lacks permission for an operation.

    Note:
        For authentication failures (missing/invalid token), DRF raises
        NotAuthenticated/AuthenticationFailed. Use this for authorization
        failures decided in the service layer.
    """

    default_error_code: str = "PERMISSION_DENIED"
    status_code: int = status.HTTP_403_FORBIDDEN


# =============================================================================
# DRF Exception Handler
# =============================================================================


def api_exception_handler(exc, context):
    """
    Render API errors as {"error": ..., ["details": ...]}.

    - BaseApplicationError: to_dict() with the error's status_code
    - DRF APIException (401, 403, 404, 405, 429...): "detail" becomes "error",
      field errors are kept under "details"
    - Anything else: logged and returned as a 500
    """
    if isinstance(exc, BaseApplicationError):
        log = logger.error if exc.status_code >= 500 else logger.info
        log(
            f"Application error in {context['view'].__class__.__name__}: {exc}",
            extra={"error_code": exc.error_code},
        )
        return Response(exc.to_dict(), status=exc.status_code)

    response = exception_handler(exc, context)

    if response is not None:
        data = response.data
        if isinstance(data, dict) and "detail" in data:
            response.data = {"error": str(data["detail"])}
        else:
            response.data = {"error": "Invalid request.", "details": data}
        return response

    logger.exception(
        f"Unhandled error in {context['view'].__class__.__name__}",
        extra={"exception_type": type(exc).__name__},
    )
    return Response(
        {"error": "Internal server error.", "details": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
