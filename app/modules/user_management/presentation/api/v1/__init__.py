# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the user endpoints.
# 🧪 Purpose (Technical Summary):
# API v1 routers for user management, mounted by app.api.v1.router under /api/v1/users.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.presentation.api.v1.users import users_router

__all__ = ["users_router"]
