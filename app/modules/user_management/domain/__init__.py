# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core business rules for user records - what a valid user is, which roles exist
# and when a user may be changed or removed.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization containing the User entity, the domain service and the
# repository interface for user management.
# 🔗 Dependencies:
# Domain models, services, repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, Presentation layer

"""
User Management Domain Layer

Business Rules Enforced:
- Email uniqueness among non-deleted users
- Passwords are only ever stored hashed
- Admin users cannot be deleted
- Deleted users are invisible to every read
"""

from .models.user import User, UserRole
from .repositories.user_repository import UserListParams, UserRepository
from .services.user_service import UserService

__all__ = [
    "User",
    "UserRole",
    "UserListParams",
    "UserRepository",
    "UserService",
]
