# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# This file provides health check endpoints that tell us if the API is working properly,
# like a quick checkup confirming the process is alive and the database answers.
# 🧪 Purpose (Technical Summary):
# Status, liveness and readiness endpoints returning the standard envelope; readiness runs a
# real ``SELECT 1`` probe and answers 503 when the database is unreachable. Mounted at the
# application root and exempt from rate limiting.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection, app.shared.utils.formatters, psutil
# 🔄 Connected Modules / Calls From:
# app.main, load balancers and orchestrator probes

import logging
import os
import time

import psutil
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check
from app.shared.utils.formatters import error_response, success_response

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = time.monotonic()


def _megabytes(num_bytes: int) -> str:
    return f"{round(num_bytes / 1024 / 1024)} MB"


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Service status with uptime, environment, version and memory usage",
                   tags=["Health Check"])
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Reports process uptime in seconds and resident memory of this process
    against total system memory.
    """
    settings = get_settings()
    process_memory = psutil.Process(os.getpid()).memory_info()

    return success_response(
        data={
            "uptime": round(time.monotonic() - _app_start_time, 3),
            "environment": settings.ENVIRONMENT,
            "version": settings.APP_VERSION,
            "memory": {
                "used": _megabytes(process_memory.rss),
                "total": _megabytes(psutil.virtual_memory().total),
            },
        },
        message="Service is healthy",
    )


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Readiness probe; checks database connectivity",
                   tags=["Health Check"])
async def readiness_probe() -> JSONResponse:
    """
    Readiness probe

    Returns 200 if the application is ready to serve traffic and 503 when
    the database does not answer.
    """
    db_health = await db_health_check()

    if db_health["status"] == "healthy":
        return success_response(
            data={"database": "connected", "services": "operational"},
            message="Service is ready",
        )

    logger.warning(f"Readiness probe failed: {db_health.get('error')}")
    return error_response(
        message="Service is not ready",
        status_code=503,
        errors=[{"field": "database", "message": "disconnected"}],
    )


@health_router.get("/health/live",
                   summary="Liveness Probe",
                   description="Liveness probe endpoint",
                   tags=["Health Check"])
async def liveness_probe() -> JSONResponse:
    """Returns 200 while the process is running."""
    return success_response(
        data={"status": "alive", "pid": os.getpid()},
        message="Service is alive",
    )


HEALTH_ENDPOINTS = (health_check, readiness_probe, liveness_probe)
