# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains all the web endpoints for managing user records: listing and searching users,
# looking one up, creating, updating and deleting them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI user CRUD endpoints: request validation through Pydantic schemas, business logic through
# UserService, and every result wrapped in the standard success envelope. A diagnostic endpoint
# raises an unhandled error to exercise the central error handling.
#
# 🔗 Dependencies:
# - FastAPI router, Path/Query parameters, status codes
# - app.modules.user_management.presentation.api.schemas.user_schemas (request/response schemas)
# - app.modules.user_management.presentation.dependencies (service wiring)
# - app.shared.utils.formatters (response envelope)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/users)

"""
Users API Endpoints

Endpoints:
- GET /: List users with pagination, search, role filter and sorting
- GET /error: Diagnostic endpoint that always fails with a 500
- GET /{user_id}: Get a single user
- POST /: Create a user
- PUT /{user_id}: Partially update a user
- DELETE /{user_id}: Soft delete a user (admins cannot be deleted)

Every route is covered by the application-wide rate limit.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse

from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    UserCreateRequest,
    UserDeleteResponse,
    UserListQuery,
    UserResponse,
    UserUpdateRequest,
)
from app.modules.user_management.presentation.dependencies import get_user_service
from app.shared.utils.formatters import build_pagination_meta, success_response
from app.shared.utils.validators import MAX_USER_ID

logger = logging.getLogger(__name__)

# Create router
users_router = APIRouter()

UserId = Annotated[int, Path(ge=0, le=MAX_USER_ID, description="User ID")]


@users_router.get(
    "",
    summary="List users",
    description="List non-deleted users with pagination, free-text search, role filter and sorting",
    responses={
        200: {"description": "Page of users with pagination and filter metadata"},
        422: {"description": "Query validation failed"},
        429: {"description": "Rate limit exceeded"},
    }
)
async def list_users(
    query: Annotated[UserListQuery, Query()],
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """
    List users.

    Args:
        query: Validated pagination, search, role and sort options
        user_service: Injected user domain service

    Returns:
        JSONResponse: Envelope with the users and ``meta.pagination`` / ``meta.filters``
    """
    users, total = await user_service.list_users(query.to_params())

    return success_response(
        data=[UserResponse.from_domain(user) for user in users],
        message="Users retrieved successfully",
        meta={
            "pagination": build_pagination_meta(query.page, query.limit, total),
            "filters": query.filters_meta(),
        },
    )


@users_router.get(
    "/error",
    summary="Trigger an internal error",
    description="Diagnostic endpoint that raises an unhandled exception to verify error handling",
    responses={500: {"description": "Always fails"}},
)
async def trigger_error() -> JSONResponse:
    raise RuntimeError("This is a test error")


@users_router.get(
    "/{user_id}",
    summary="Get user by ID",
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found or deleted"},
        422: {"description": "Parameter validation failed"},
    }
)
async def get_user(
    user_id: UserId,
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    user = await user_service.get_user(user_id)
    return success_response(
        data=UserResponse.from_domain(user),
        message="User retrieved successfully",
    )


@users_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a user. The password is hashed and never returned.",
    responses={
        201: {"description": "User created"},
        400: {"description": "User with this email already exists"},
        422: {"description": "Validation failed"},
    }
)
async def create_user(
    payload: UserCreateRequest,
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """
    Create a new user.

    Args:
        payload: Validated create payload
        user_service: Injected user domain service

    Returns:
        JSONResponse: 201 envelope with the created user (no password)
    """
    user = await user_service.create_user(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
        phone=payload.phone,
        date_of_birth=payload.date_of_birth,
    )

    return success_response(
        data=UserResponse.from_domain(user),
        message="User created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@users_router.put(
    "/{user_id}",
    summary="Update user",
    description="Partially update a user; at least one field is required",
    responses={
        200: {"description": "User updated"},
        400: {"description": "Email already exists"},
        404: {"description": "User not found or deleted"},
        422: {"description": "Validation failed"},
    }
)
async def update_user(
    user_id: UserId,
    payload: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    user = await user_service.update_user(user_id, payload.to_changes())
    return success_response(
        data=UserResponse.from_domain(user),
        message="User updated successfully",
    )


@users_router.delete(
    "/{user_id}",
    summary="Delete user",
    description="Soft delete a user. Admin users cannot be deleted.",
    responses={
        200: {"description": "User deleted"},
        400: {"description": "Cannot delete admin users"},
        404: {"description": "User not found or already deleted"},
    }
)
async def delete_user(
    user_id: UserId,
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    user = await user_service.delete_user(user_id)
    return success_response(
        data=UserDeleteResponse.from_domain(user),
        message="User deleted successfully",
    )
