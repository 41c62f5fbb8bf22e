"""
Core utilities package for the User Records API.
Provides the exception taxonomy and password hashing.
"""

from .security import (
    get_password_hash,
    verify_password,
    SecurityManager,
    get_security_manager
)

from .exceptions import (
    UserApiException,
    NotFoundError,
    DuplicateResourceError,
    BusinessRuleViolationError,
    RateLimitError,
    DatabaseError,
    is_client_error
)

__all__ = [
    # Security
    "get_password_hash",
    "verify_password",
    "SecurityManager",
    "get_security_manager",

    # Exceptions
    "UserApiException",
    "NotFoundError",
    "DuplicateResourceError",
    "BusinessRuleViolationError",
    "RateLimitError",
    "DatabaseError",
    "is_client_error",
]
