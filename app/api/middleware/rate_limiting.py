# 📄 File: app/api/middleware/rate_limiting.py
# 🧭 Purpose (Layman Explanation):
# This file makes sure no single client can flood the API with requests, like a bouncer
# that only lets a certain number of people through the door every few minutes.
# 🧪 Purpose (Technical Summary):
# Per-client-IP rate limiting built on slowapi: one application-wide budget shared by every
# route (default 100 requests per 15 minutes), enforced by SlowAPIMiddleware, answered with a
# 429 envelope. Health probes are exempt.
# 🔗 Dependencies:
# slowapi, limits (via slowapi), app.shared.config.settings, app.shared.utils.formatters
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.api.v1.health import HEALTH_ENDPOINTS
from app.shared.config.settings import Settings
from app.shared.core.exceptions import RateLimitError
from app.shared.utils.formatters import error_response
from .error_handling import log_error

logger = logging.getLogger(__name__)


def create_limiter(settings: Settings) -> Limiter:
    """
    Build the application limiter

    The configured limit is registered as an application limit, so all
    routes draw from one budget per client IP instead of one per route.

    Args:
        settings: Application settings

    Returns:
        Configured slowapi Limiter
    """
    return Limiter(
        key_func=get_remote_address,
        application_limits=[settings.RATE_LIMIT],
        storage_uri=settings.RATE_LIMIT_STORAGE_URI,
        enabled=settings.RATE_LIMIT_ENABLED,
        headers_enabled=True,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Answer a rejected request with the 429 error envelope

    SlowAPIMiddleware calls this handler synchronously, so it must not be
    a coroutine.
    """
    error = RateLimitError(limit=str(exc.detail))
    log_error(request, error, error.status_code)

    response = error_response(message=error.message, status_code=error.status_code)
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)


def setup_rate_limiting(app: FastAPI, settings: Settings) -> Limiter:
    """
    Attach the limiter, its 429 handler and SlowAPIMiddleware to the app

    Args:
        app: FastAPI application
        settings: Application settings

    Returns:
        The limiter stored on ``app.state.limiter``
    """
    limiter = create_limiter(settings)

    for endpoint in HEALTH_ENDPOINTS:
        limiter.exempt(endpoint)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.info(
        f"Rate limiting {'enabled' if settings.RATE_LIMIT_ENABLED else 'disabled'}: "
        f"{settings.RATE_LIMIT} per client IP"
    )
    return limiter
