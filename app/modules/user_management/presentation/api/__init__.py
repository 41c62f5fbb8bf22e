# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the user endpoints and their request/response definitions.
# 🧪 Purpose (Technical Summary):
# User management API package: versioned routers (v1) and Pydantic schemas.
# 🔗 Dependencies:
# FastAPI, Pydantic
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.presentation.api.v1.users import users_router

__all__ = ["users_router"]
