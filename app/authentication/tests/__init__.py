"""
Tests for authentication app.

This package contains test modules for:
- test_models.py: User and Profile model tests
- test_managers.py: UserManager tests
- test_permissions.py: IsSiteAdmin tests
- test_services.py: AdminUserService tests
- test_views.py: Admin API and token endpoint tests

Usage:
    pytest app/authentication/tests/
    pytest app/authentication/tests/test_views.py
"""
