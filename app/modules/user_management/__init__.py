# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the user management system that stores user records and lets clients list, look up,
# create, change and remove them.
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module, laid out in domain-driven layers
# for user record CRUD with soft delete.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, app.shared.core, pydantic, passlib
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, all user-related API endpoints

"""
User Management Module

Architecture follows Domain-Driven Design:
- Domain: User entity, business rules and the repository contract
- Infrastructure: SQLAlchemy table, repository implementation and demo seed data
- Presentation: API endpoints and request/response schemas

Key Features:
- Paginated listing with free-text search, role filter and sorting
- Email uniqueness among live users
- Soft delete (admins cannot be deleted)
- Passwords stored as bcrypt hashes and never returned
"""

__version__ = "1.0.0"
