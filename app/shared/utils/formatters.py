# 📄 File: app/shared/utils/formatters.py

# 🧭 Purpose (Layman Explanation):
# This file wraps every answer the API gives in the same "envelope", so clients always find
# the success flag, a message, the data and a timestamp in the same place.

# 🧪 Purpose (Technical Summary):
# Response envelope formatting for success and error payloads, pagination metadata math,
# and JSONResponse construction with FastAPI's jsonable_encoder (camelCase aliases preserved).

# 🔗 Dependencies:
# - fastapi.encoders.jsonable_encoder, fastapi.responses.JSONResponse
# - datetime: ISO-8601 UTC timestamps

# 🔄 Connected Modules / Calls From:
# Used by: user endpoints, health endpoints, API index, error handling middleware and handlers

import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_success_response(
    data: Any = None,
    message: str = "Success",
    status_code: int = 200,
    meta: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Build the success envelope.

    Args:
        data: Payload, encoded with jsonable_encoder (aliases kept)
        message: Human-readable message
        status_code: HTTP status code echoed in the body
        meta: Optional metadata such as pagination

    Returns:
        Dict with success, message, data, statusCode, timestamp and optional meta
    """
    response = {
        "success": True,
        "message": message,
        "data": jsonable_encoder(data),
        "statusCode": status_code,
        "timestamp": utc_timestamp(),
    }

    if meta is not None:
        response["meta"] = jsonable_encoder(meta)

    return response


def format_error_response(
    message: str,
    status_code: int = 500,
    errors: Optional[List[Dict[str, Any]]] = None,
    stack: Optional[List[str]] = None
) -> Dict[str, Any]:
    """
    Build the error envelope.

    ``errors`` holds field-level ``{field, message}`` entries and is omitted
    when empty. ``stack`` is only passed for debug builds.
    """
    response: Dict[str, Any] = {
        "success": False,
        "message": message,
        "data": None,
        "statusCode": status_code,
        "timestamp": utc_timestamp(),
    }

    if errors:
        response["errors"] = jsonable_encoder(errors)
    if stack:
        response["stack"] = stack

    return response


def success_response(
    data: Any = None,
    message: str = "Success",
    status_code: int = 200,
    meta: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """JSONResponse carrying the success envelope."""
    return JSONResponse(
        status_code=status_code,
        content=format_success_response(data, message, status_code, meta),
    )


def error_response(
    message: str,
    status_code: int = 500,
    errors: Optional[List[Dict[str, Any]]] = None,
    stack: Optional[List[str]] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """JSONResponse carrying the error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=format_error_response(message, status_code, errors, stack),
        headers=headers,
    )


def build_pagination_meta(page: int, limit: int, total: int) -> Dict[str, Any]:
    """
    Compute pagination metadata.

    Args:
        page: 1-based page number requested
        limit: Page size
        total: Number of matching records

    Returns:
        Dict with page, limit, total, pages, hasNext, hasPrev
    """
    pages = math.ceil(total / limit) if limit else 0
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": pages,
        "hasNext": page < pages,
        "hasPrev": page > 1,
    }
