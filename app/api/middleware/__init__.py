# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the middleware components that act like guards and helpers for our API,
# checking request limits, logging what happens and turning errors into friendly answers.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components: error handling, request logging and
# slowapi-based rate limiting.
# 🔗 Dependencies:
# FastAPI middleware components, slowapi
# 🔄 Connected Modules / Calls From:
# app.main.py, FastAPI application setup, middleware registration

"""
User Records API Middleware Package

Middleware Stack Order (outermost first):
    1. ErrorHandlingMiddleware (request ids, catches all unhandled errors)
    2. CORSMiddleware
    3. RequestLoggingMiddleware (logs all requests/responses)
    4. SlowAPIMiddleware (enforces the per-IP rate limit)
    5. Application Routes (innermost)

Starlette applies middleware in reverse registration order, so
``ErrorHandlingMiddleware`` is added last.
"""

from .error_handling import ErrorHandlingMiddleware, register_exception_handlers
from .logging import RequestLoggingMiddleware
from .rate_limiting import setup_rate_limiting

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "register_exception_handlers",
    "setup_rate_limiting",
]
