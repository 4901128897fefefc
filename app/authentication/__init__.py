"""
Authentication application.

This app provides email-based users, their profiles and the admin user
management API.

Key components:
    - User model: Custom email-based user authentication
    - Profile model: Display name and role (customer or admin)
    - IsSiteAdmin: Admin check by role or ADMIN_EMAILS allow-list
    - AdminUserService: List users, change roles, delete users, send reset links

Usage:
    from authentication.models import User, Profile
    from authentication.services import AdminUserService
"""
