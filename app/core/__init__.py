"""
Core Application - Infrastructure & Base Classes

Generic, reusable base classes shared by the domain apps (authentication,
payments, storefront). No business logic lives here.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key
    - SingletonMixin: Single-row tables

Services (import from core.services):
    - BaseService: Base class for service layer (logger, atomic)

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes and HTTP status
    - ValidationError, NotFoundError, PermissionDeniedError
    - api_exception_handler: DRF EXCEPTION_HANDLER rendering {"error": ...}

Management commands:
    - check_database: Report tables, columns and functions of the database

Note:
    Nothing is imported here so the package can load before Django's app
    registry is ready. Import from the submodules directly.
"""
