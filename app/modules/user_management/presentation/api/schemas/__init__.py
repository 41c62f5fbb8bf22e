# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the definitions of what user requests must look like and what answers look like.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for user management with camelCase aliases.
# 🔗 Dependencies:
# Pydantic, app.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.users

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.presentation.api.schemas.user_schemas import (
        UserCreateRequest,
        UserUpdateRequest,
        UserListQuery,
        UserResponse,
        UserDeleteResponse,
    )

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserListQuery",
    "UserResponse",
    "UserDeleteResponse",
]
