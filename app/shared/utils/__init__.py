# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a collection of helpful tools that other parts of the app use for
# common tasks like logging, checking input and shaping responses.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package: structured logging, request validation helpers
# and response envelope formatters.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - validators: Input sanitizing, field validators and validation error formatting
# - formatters: Success/error envelopes and pagination metadata

# 🔄 Connected Modules / Calls From:
# Used by: API layer, request schemas, middleware

"""
Shared Utilities Package

- Structured logging with JSON formatting and request id correlation
- Data validation functions and field-level error formatting
- Response envelope and pagination formatting
"""

from .formatters import (
    build_pagination_meta,
    error_response,
    format_error_response,
    format_success_response,
    success_response,
)
from .logging import setup_logging

__all__ = [
    "build_pagination_meta",
    "error_response",
    "format_error_response",
    "format_success_response",
    "success_response",
    "setup_logging",
]
