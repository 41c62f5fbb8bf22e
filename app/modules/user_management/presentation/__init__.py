# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the web-facing part of user management: the endpoints and the shapes of the
# data they accept and return.
# 🧪 Purpose (Technical Summary):
# Presentation layer initialization for user management: FastAPI router, Pydantic request/response
# schemas and dependency wiring. Imports are deferred to avoid circular imports at startup.
# 🔗 Dependencies:
# FastAPI, Pydantic, domain services
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.presentation.api.v1.users import users_router
    from app.modules.user_management.presentation.dependencies import get_user_service

__all__ = [
    "users_router",
    "get_user_service",
]
