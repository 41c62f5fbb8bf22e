# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to the API, recording what was asked for,
# how long it took to answer and how it ended - like a security camera for our API.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: one structured record per request and per response with method,
# path, filtered query/headers, client address, status code and duration, with slow requests
# promoted to warnings. Correlated through the request id set by ErrorHandlingMiddleware.
# 🔗 Dependencies:
# FastAPI, starlette BaseHTTPMiddleware, logging, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration; disabled in the test environment)

import logging
import time
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from .error_handling import get_client_ip

logger = logging.getLogger(__name__)

# Sensitive headers that should not be logged
SENSITIVE_HEADERS = {
    "authorization",
    "cookie",
    "x-api-key",
    "x-access-token",
    "x-auth-token",
}

SENSITIVE_PARAMS = {"password", "token", "api_key", "secret"}

REDACTED = "[REDACTED]"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Structured request/response records
    - Request timing with slow request warnings
    - Sensitive header and query parameter redaction
    """

    def __init__(
        self,
        app: ASGIApp,
        slow_request_threshold: float = 2.0,
        very_slow_request_threshold: float = 5.0,
    ):
        super().__init__(app)
        self.settings = get_settings()
        self.slow_request_threshold = slow_request_threshold
        self.very_slow_request_threshold = very_slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        start_time = time.perf_counter()
        logger.info(
            f"{request.method} {request.url.path}",
            extra=self._request_log_data(request),
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"{request.method} {request.url.path} raised {type(exc).__name__}",
                extra={
                    "event_type": "http_error",
                    "method": request.method,
                    "path": request.url.path,
                    "processing_time_ms": self._elapsed_ms(start_time),
                    "exception_type": type(exc).__name__,
                },
            )
            raise

        processing_time_ms = self._elapsed_ms(start_time)
        performance = self._classify(processing_time_ms / 1000)
        log_data = {
            "event_type": "http_response",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "processing_time_ms": processing_time_ms,
            "performance": performance,
        }

        message = f"{request.method} {request.url.path} {response.status_code} {processing_time_ms}ms"
        if performance != "normal":
            logger.warning(f"Slow request: {message}", extra=log_data)
        else:
            logger.info(message, extra=log_data)

        return response

    def _request_log_data(self, request: Request) -> Dict[str, Any]:
        log_data = {
            "event_type": "http_request",
            "method": request.method,
            "path": request.url.path,
            "query_params": filter_sensitive(dict(request.query_params), SENSITIVE_PARAMS),
            "client_ip": get_client_ip(request),
            "user_agent": request.headers.get("user-agent", ""),
        }

        if self.settings.is_development:
            log_data["headers"] = filter_sensitive(dict(request.headers), SENSITIVE_HEADERS)

        return log_data

    def _classify(self, processing_time: float) -> str:
        if processing_time > self.very_slow_request_threshold:
            return "very_slow"
        if processing_time > self.slow_request_threshold:
            return "slow"
        return "normal"

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)


def filter_sensitive(values: Dict[str, str], sensitive_keys: set) -> Dict[str, str]:
    """
    Redact sensitive entries before logging

    Keys are matched case-insensitively; anything mentioning a password or
    secret is redacted as well.

    Args:
        values: Headers or query parameters
        sensitive_keys: Lower-case keys to redact

    Returns:
        Filtered copy of ``values``
    """
    filtered = {}
    for key, value in values.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or "password" in key_lower or "secret" in key_lower:
            filtered[key] = REDACTED
        else:
            filtered[key] = value
    return filtered
