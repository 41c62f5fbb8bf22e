# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access interfaces that define how to save, find and remove user records
# 🧪 Purpose (Technical Summary):
# Package initialization for repository interfaces following the Repository pattern for data access abstraction
# 🔗 Dependencies:
# Repository interface classes, domain models, typing
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

"""
User Management Domain Repositories

Repository Interfaces:
- UserRepository: Data access interface for User entities

Implementation Note:
- These are interfaces/abstract classes only
- Concrete implementations are in infrastructure layer
- Domain services depend on these interfaces
"""

from .user_repository import UserListParams, UserRepository

__all__ = [
    "UserListParams",
    "UserRepository",
]
