# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending user requests
# to the user handlers and answering "what endpoints exist?" questions.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation: mounts the user management router under ``/users`` and
# serves the endpoint index at ``/docs``. Mounted by app.main under ``/api/v1``.
# 🔗 Dependencies:
# FastAPI, app.modules.user_management.presentation.api.v1.users, app.shared.utils.formatters
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.modules.user_management.presentation.api.v1.users import users_router
from app.shared.config.settings import get_settings
from app.shared.utils.formatters import success_response

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

# Create main API v1 router
api_v1_router = APIRouter()

api_v1_router.include_router(users_router, prefix="/users", tags=["Users"])


# =========================================================================
# API V1 INFO ENDPOINT
# =========================================================================

@api_v1_router.get("/docs",
                   summary="API v1 Documentation",
                   description="List of available endpoints",
                   tags=["API Info"])
async def api_v1_docs() -> JSONResponse:
    """
    API v1 endpoint index

    The interactive OpenAPI documentation is served separately at ``/docs``.
    """
    return success_response(
        data={
            "version": get_settings().APP_VERSION,
            "endpoints": {
                "health": {
                    "/health": "Basic health check",
                    "/health/ready": "Readiness probe",
                    "/health/live": "Liveness probe",
                },
                "users": {
                    f"GET {API_V1_PREFIX}/users": "Get all users",
                    f"GET {API_V1_PREFIX}/users/:id": "Get single user",
                    f"POST {API_V1_PREFIX}/users": "Create new user",
                    f"PUT {API_V1_PREFIX}/users/:id": "Update user",
                    f"DELETE {API_V1_PREFIX}/users/:id": "Delete user",
                    f"GET {API_V1_PREFIX}/users/error": "Test error handling",
                },
                "api": {
                    f"{API_V1_PREFIX}/docs": "API documentation",
                },
            },
            "documentation": "/docs",
        },
        message="API Documentation",
    )
