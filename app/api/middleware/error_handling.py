# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into friendly, consistent error messages
# that clients can understand, using the same envelope as successful answers.
# 🧪 Purpose (Technical Summary):
# Global error handling: an outermost middleware that assigns request ids and converts unhandled exceptions
# into 500 envelopes, plus FastAPI exception handlers mapping the domain exception taxonomy, request
# validation failures and routing errors (404/405) to status codes and field-level error lists.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.core.exceptions, app.shared.utils (formatters, validators, logging)
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware and handler registration)

import logging
import traceback
import uuid
from typing import List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import HTTP_422_UNPROCESSABLE, UserApiException, is_client_error
from app.shared.utils.formatters import error_response
from app.shared.utils.logging import request_id_var
from app.shared.utils.validators import format_validation_errors

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the User Records API

    Registered last so it wraps every other middleware. It assigns the
    request correlation id (reusing an incoming ``X-Request-ID`` header)
    and turns any exception nothing else handled into a 500 envelope, so
    an unhandled error never takes the process down.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and handle any exceptions that occur

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        try:
            response = await call_next(request)
        except Exception as exc:
            response = self._handle_exception(request, exc)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Build the 500 envelope for an exception that escaped every handler
        """
        log_error(request, exc, 500)
        return error_response(
            message=INTERNAL_ERROR_MESSAGE,
            status_code=500,
            stack=debug_stack(exc),
        )


# =========================================================================
# HELPERS
# =========================================================================

def debug_stack(exc: Exception) -> Optional[List[str]]:
    """Traceback lines for the error envelope, only in debug builds outside production."""
    settings = get_settings()
    if not settings.DEBUG or settings.is_production:
        return None
    return traceback.format_exception(type(exc), exc, exc.__traceback__)


def get_client_ip(request: Request) -> str:
    """
    Get client IP address from request headers

    Args:
        request: HTTP request

    Returns:
        Client IP address
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"


def log_error(request: Request, exc: Exception, status_code: int) -> None:
    """
    Log error with appropriate level and context

    5xx are logged as errors with traceback, 429 as warnings and other
    4xx as info.
    """
    log_context = {
        "method": request.method,
        "path": str(request.url.path),
        "client_ip": get_client_ip(request),
        "status_code": status_code,
        "exception_type": type(exc).__name__,
    }
    if isinstance(exc, UserApiException):
        log_context["error_code"] = exc.error_code
        log_context.update(exc.details)

    if status_code >= 500:
        logger.error(
            f"Server error in {request.method} {request.url.path}: {exc}",
            extra=log_context,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    elif status_code == 429:
        logger.warning(
            f"Rate limit exceeded for {request.method} {request.url.path}",
            extra=log_context
        )
    else:
        logger.info(
            f"Client error in {request.method} {request.url.path}: {exc}",
            extra=log_context
        )


# =========================================================================
# EXCEPTION HANDLERS
# =========================================================================

async def user_api_exception_handler(request: Request, exc: UserApiException) -> JSONResponse:
    """Handle the application exception taxonomy."""
    log_error(request, exc, exc.status_code)

    return error_response(
        message=exc.message,
        status_code=exc.status_code,
        errors=exc.errors,
        stack=None if is_client_error(exc) else debug_stack(exc),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request validation failures

    The envelope message names the failing source: body, path
    parameters or query string.
    """
    message, errors = format_validation_errors(exc.errors())
    log_error(request, exc, HTTP_422_UNPROCESSABLE)
    return error_response(message=message, status_code=HTTP_422_UNPROCESSABLE, errors=errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors and explicit HTTPExceptions."""
    if exc.status_code == 404:
        message = f"Route {request.url.path} not found"
    elif exc.status_code == 405:
        message = f"Method {request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)

    log_error(request, exc, exc.status_code)
    return error_response(message=message, status_code=exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every envelope-producing exception handler to the application."""
    app.add_exception_handler(UserApiException, user_api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
