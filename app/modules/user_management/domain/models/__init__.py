# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the definition of what a user record looks like inside the business logic.
# 🧪 Purpose (Technical Summary):
# Domain models package exporting the User entity and the UserRole enumeration.
# 🔗 Dependencies:
# pydantic, app.shared.core.security
# 🔄 Connected Modules / Calls From:
# Domain services, repository implementations, API schemas

from .user import User, UserRole, utc_now

__all__ = [
    "User",
    "UserRole",
    "utc_now",
]
