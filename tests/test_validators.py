"""
Tests for validation helpers, error formatting and response formatting.
"""

from datetime import date, timedelta

import pytest

from app.shared.utils.formatters import build_pagination_meta, format_error_response, format_success_response
from app.shared.utils.validators import (
    format_validation_errors,
    sanitize_input,
    validate_date_of_birth,
    validate_email_address,
    validate_password_strength,
    validate_phone_number,
)


class TestSanitizeInput:
    """Tests for sanitize_input."""

    def test_strips_script_tags(self) -> None:
        assert sanitize_input("<script>alert('x')</script>Hello") == "Hello"

    def test_strips_javascript_protocol(self) -> None:
        assert sanitize_input("javascript:alert(1)") == "alert(1)"

    def test_strips_event_handlers(self) -> None:
        assert sanitize_input('<img onerror=alert(1)>') == "<img alert(1)>"

    def test_trims_whitespace(self) -> None:
        assert sanitize_input("  Jane  ") == "Jane"

    def test_non_strings_untouched(self) -> None:
        assert sanitize_input(42) == 42
        assert sanitize_input(None) is None


class TestFieldValidators:
    """Tests for the single-field validators."""

    def test_email_is_normalized(self) -> None:
        assert validate_email_address(" Jane@Example.com ") == "jane@example.com"

    def test_invalid_email(self) -> None:
        with pytest.raises(ValueError, match="Email must be a valid email address"):
            validate_email_address("jane@")

    @pytest.mark.parametrize("password", ["SecurePass123!", "Aa1@aaaa", "TestPass123!#", "Test Pass123!", "Pass_word1!"])
    def test_strong_passwords(self, password: str) -> None:
        assert validate_password_strength(password) == password

    @pytest.mark.parametrize("password", ["securepass123!", "SECUREPASS123!", "SecurePass!!", "SecurePass123", "Secure_Pass123#"])
    def test_weak_passwords(self, password: str) -> None:
        with pytest.raises(ValueError):
            validate_password_strength(password)

    def test_phone_formats(self) -> None:
        assert validate_phone_number("+1234567890") == "+1234567890"
        assert validate_phone_number(None) is None
        with pytest.raises(ValueError, match="Phone number must be a valid format"):
            validate_phone_number("call-me")
        with pytest.raises(ValueError):
            validate_phone_number("+0123")

    def test_date_of_birth(self) -> None:
        assert validate_date_of_birth(date(1990, 1, 15)) == date(1990, 1, 15)
        with pytest.raises(ValueError, match="cannot be in the future"):
            validate_date_of_birth(date.today() + timedelta(days=1))


class TestFormatValidationErrors:
    """Tests for translating pydantic error dicts into field errors."""

    def test_body_errors(self) -> None:
        message, errors = format_validation_errors([
            {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
            {"type": "value_error", "loc": ("body", "email"), "msg": "Value error, Email must be a valid email address"},
        ])

        assert message == "Validation failed"
        assert errors == [
            {"field": "name", "message": "Name is required"},
            {"field": "email", "message": "Email must be a valid email address"},
        ]

    def test_query_errors(self) -> None:
        message, errors = format_validation_errors([
            {"type": "less_than_equal", "loc": ("query", "limit"), "msg": "Input should be less than or equal to 100"},
        ])

        assert message == "Query validation failed"
        assert errors == [{"field": "limit", "message": "Limit must be at most 100"}]

    def test_path_errors(self) -> None:
        message, errors = format_validation_errors([
            {"type": "int_parsing", "loc": ("path", "user_id"), "msg": "Input should be a valid integer"},
        ])

        assert message == "Parameter validation failed"
        assert errors == [{"field": "id", "message": "User ID must be a valid number"}]

    def test_extra_field(self) -> None:
        _, errors = format_validation_errors([
            {"type": "extra_forbidden", "loc": ("body", "admin"), "msg": "Extra inputs are not permitted"},
        ])

        assert errors == [{"field": "admin", "message": '"admin" is not allowed'}]

    def test_missing_body(self) -> None:
        _, errors = format_validation_errors([
            {"type": "missing", "loc": ("body",), "msg": "Field required"},
        ])

        assert errors == [{"field": "body", "message": "Request body is required"}]

    def test_null_for_typed_field(self) -> None:
        _, errors = format_validation_errors([
            {"type": "bool_type", "loc": ("body", "isActive"), "msg": "Input should be a valid boolean", "input": None},
        ])

        assert errors == [{"field": "isActive", "message": "isActive cannot be null"}]

    def test_unknown_error_keeps_pydantic_message(self) -> None:
        _, errors = format_validation_errors([
            {"type": "something_new", "loc": ("body", "name"), "msg": "Something went wrong"},
        ])

        assert errors == [{"field": "name", "message": "Something went wrong"}]


class TestFormatters:
    """Tests for the response envelope helpers."""

    def test_success_envelope(self) -> None:
        envelope = format_success_response({"id": 1}, "Done", 201, meta={"page": 1})

        assert envelope["success"] is True
        assert envelope["message"] == "Done"
        assert envelope["data"] == {"id": 1}
        assert envelope["statusCode"] == 201
        assert envelope["meta"] == {"page": 1}
        assert envelope["timestamp"].endswith("Z")

    def test_error_envelope_omits_empty_errors(self) -> None:
        envelope = format_error_response("Nope", 404)

        assert envelope["success"] is False
        assert envelope["data"] is None
        assert "errors" not in envelope
        assert "stack" not in envelope

    @pytest.mark.parametrize(
        "page,limit,total,pages,has_next,has_prev",
        [
            (1, 10, 0, 0, False, False),
            (1, 10, 25, 3, True, False),
            (3, 10, 25, 3, False, True),
            (5, 10, 25, 3, False, True),
        ],
    )
    def test_pagination_meta(self, page: int, limit: int, total: int, pages: int, has_next: bool, has_prev: bool) -> None:
        meta = build_pagination_meta(page, limit, total)

        assert meta == {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": pages,
            "hasNext": has_next,
            "hasPrev": has_prev,
        }
