# 📄 File: app/shared/utils/validators.py

# 🧭 Purpose (Layman Explanation):
# This file contains the checkers that make sure data sent to the API is correct and safe,
# like verifying email addresses, phone numbers and password strength, and it turns the
# framework's raw validation errors into friendly, field-by-field messages.

# 🧪 Purpose (Technical Summary):
# Reusable field validators (email, phone, password strength, date of birth, input sanitizing)
# used by the Pydantic request schemas, plus translation of Pydantic/FastAPI validation error
# lists into the ``[{field, message}]`` shape with per-field wording.

# 🔗 Dependencies:
# - re: Regular expression patterns for validation
# - email-validator: Email syntax validation
# - datetime: Date of birth checks

# 🔄 Connected Modules / Calls From:
# Used by: user request schemas, RequestValidationError handler in error handling middleware

import re
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

# ==============================================================================
# PATTERNS AND CONSTANTS
# ==============================================================================

PASSWORD_MIN_LENGTH = 8
PASSWORD_PATTERN = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])')
# Upper bounds that keep OFFSET and id lookups inside the database integer range
MAX_PAGE = 10_000_000
MAX_USER_ID = 2_147_483_647

PHONE_PATTERN = re.compile(r'^\+?[1-9]\d{0,15}$')

_SCRIPT_TAG_PATTERN = re.compile(r'<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>', re.IGNORECASE)
_JS_PROTOCOL_PATTERN = re.compile(r'javascript:', re.IGNORECASE)
_EVENT_HANDLER_PATTERN = re.compile(r'on\w+\s*=', re.IGNORECASE)

USER_ROLES = ("user", "admin", "moderator")
SORT_FIELDS = ("name", "email", "createdAt", "updatedAt")
SORT_ORDERS = ("asc", "desc")

# Source of the failing input -> envelope message
VALIDATION_MESSAGES = {
    "body": "Validation failed",
    "path": "Parameter validation failed",
    "query": "Query validation failed",
}


# ==============================================================================
# FIELD VALIDATORS
# ==============================================================================

def sanitize_input(value: Any) -> Any:
    """
    Strip script tags, ``javascript:`` URLs and inline event handlers from text.

    Non-string values are returned untouched.
    """
    if not isinstance(value, str):
        return value
    value = _SCRIPT_TAG_PATTERN.sub('', value)
    value = _JS_PROTOCOL_PATTERN.sub('', value)
    value = _EVENT_HANDLER_PATTERN.sub('', value)
    return value.strip()


def validate_email_address(email: str) -> str:
    """
    Validate email syntax and return the normalized, lowercased address.

    Raises:
        ValueError: If the address is not syntactically valid
    """
    try:
        valid = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError("Email must be a valid email address") from e
    return valid.normalized.lower()


def validate_password_strength(password: str) -> str:
    """Require upper, lower, digit and one of ``@$!%*?&``."""
    if not PASSWORD_PATTERN.match(password):
        raise ValueError(
            "Password must contain at least one uppercase letter, one lowercase letter, "
            "one number, and one special character"
        )
    return password


def validate_phone_number(phone: Optional[str]) -> Optional[str]:
    if phone is None:
        return None
    phone = phone.strip()
    if not PHONE_PATTERN.match(phone):
        raise ValueError("Phone number must be a valid format")
    return phone


def validate_date_of_birth(value: Optional[date]) -> Optional[date]:
    if value is not None and value > date.today():
        raise ValueError("Date of birth cannot be in the future")
    return value


# ==============================================================================
# VALIDATION ERROR TRANSLATION
# ==============================================================================

_ROLE_MESSAGE = f"Role must be one of: {', '.join(USER_ROLES)}"

# field -> pydantic error type -> message
FIELD_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "name": {
        "missing": "Name is required",
        "string_type": "Name must be a string",
        "string_too_short": "Name must be at least 2 characters long",
        "string_too_long": "Name must be less than 50 characters",
    },
    "email": {
        "missing": "Email is required",
        "string_type": "Email must be a valid email address",
    },
    "password": {
        "missing": "Password is required",
        "string_type": "Password must be a string",
        "string_too_short": "Password must be at least 8 characters long",
        "string_too_long": "Password must be less than 128 characters",
    },
    "role": {
        "enum": _ROLE_MESSAGE,
        "literal_error": _ROLE_MESSAGE,
    },
    "phone": {
        "string_type": "Phone number must be a valid format",
    },
    "dateOfBirth": {
        "date_type": "Date of birth must be a valid date",
        "date_parsing": "Date of birth must be a valid date",
        "date_from_datetime_parsing": "Date of birth must be a valid date",
        "date_from_datetime_inexact": "Date of birth must be a valid date",
    },
    "isActive": {
        "bool_type": "isActive must be a boolean",
        "bool_parsing": "isActive must be a boolean",
    },
    "page": {
        "int_type": "Page must be a number",
        "int_parsing": "Page must be a number",
        "int_from_float": "Page must be an integer",
        "greater_than_equal": "Page must be at least 1",
        "less_than_equal": f"Page must be at most {MAX_PAGE}",
    },
    "limit": {
        "int_type": "Limit must be a number",
        "int_parsing": "Limit must be a number",
        "int_from_float": "Limit must be an integer",
        "greater_than_equal": "Limit must be at least 1",
        "less_than_equal": "Limit must be at most 100",
    },
    "search": {
        "string_too_short": "Search term must be at least 1 character",
        "string_too_long": "Search term must be less than 100 characters",
    },
    "sortBy": {
        "enum": f"Sort field must be one of: {', '.join(SORT_FIELDS)}",
        "literal_error": f"Sort field must be one of: {', '.join(SORT_FIELDS)}",
    },
    "sortOrder": {
        "enum": "Sort order must be either asc or desc",
        "literal_error": "Sort order must be either asc or desc",
    },
    "id": {
        "missing": "User ID is required",
        "int_type": "User ID must be a valid number",
        "int_parsing": "User ID must be a valid number",
        "int_from_float": "User ID must be a valid number",
        "greater_than_equal": "User ID must be a valid number",
        "less_than_equal": "User ID must be a valid number",
    },
}

# Explicit null sent for a non-nullable field
_NOT_NULL_MESSAGE = "{field} cannot be null"

_PREFIXES = ("Value error, ", "Assertion failed, ")

# Path parameters reported under their public name
_PATH_FIELD_NAMES = {"user_id": "id"}


def _error_field(loc: Tuple[Any, ...]) -> str:
    """Dotted field path without the source prefix (``body``/``query``/``path``)."""
    parts = [str(part) for part in loc[1:]] if loc and loc[0] in VALIDATION_MESSAGES else [str(p) for p in loc]
    if loc and loc[0] == "path" and parts:
        parts[0] = _PATH_FIELD_NAMES.get(parts[0], parts[0])
    return ".".join(parts) if parts else (str(loc[0]) if loc else "request")


def _error_message(field: str, error: Dict[str, Any]) -> str:
    error_type = error.get("type", "")
    message = error.get("msg", "Invalid value")

    if error_type in ("value_error", "assertion_error"):
        for prefix in _PREFIXES:
            if message.startswith(prefix):
                return message[len(prefix):]
        return message

    if error_type == "extra_forbidden":
        return f'"{field}" is not allowed'

    if error_type == "json_invalid":
        return "Request body must be valid JSON"

    if error_type == "missing" and field == "body":
        return "Request body is required"

    leaf = field.rsplit(".", 1)[-1]
    if error_type.endswith("_type") and error.get("input", "") is None:
        return _NOT_NULL_MESSAGE.format(field=leaf)

    catalog = FIELD_ERROR_MESSAGES.get(leaf, {})
    if error_type in catalog:
        return catalog[error_type]

    return message


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> Tuple[str, List[Dict[str, str]]]:
    """
    Translate Pydantic error dicts into an envelope message and field errors.

    Args:
        errors: Output of ``RequestValidationError.errors()`` or
            ``pydantic.ValidationError.errors()``

    Returns:
        (message, [{"field": ..., "message": ...}]) where message depends on
        whether the first failing input came from the body, path or query
    """
    formatted: List[Dict[str, str]] = []
    source = None

    for error in errors:
        loc = tuple(error.get("loc", ()))
        if source is None and loc:
            source = loc[0]
        field = _error_field(loc)
        formatted.append({"field": field, "message": _error_message(field, error)})

    message = VALIDATION_MESSAGES.get(source, "Validation failed")
    return message, formatted
