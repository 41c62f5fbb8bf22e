"""
Tests for the /api/v1/users endpoints.
"""

from typing import Any, Callable, Dict
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.engine import Engine

from tests.conftest import USERS_URL, user_payload

CreateUser = Callable[..., Dict[str, Any]]


class TestCreateUser:
    """Tests for POST /api/v1/users."""

    def test_create_returns_201_envelope(self, client: TestClient) -> None:
        """Test that a valid payload creates the user."""
        response = client.post(USERS_URL, json=user_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User created successfully"
        assert body["data"]["name"] == "John Doe"
        assert body["data"]["email"] == "john@example.com"
        assert body["data"]["role"] == "user"
        assert body["data"]["isActive"] is True
        assert isinstance(body["data"]["id"], int)
        assert "timestamp" in body

    def test_password_is_never_returned(self, client: TestClient) -> None:
        """Test that neither the password nor its hash is serialized."""
        data = client.post(USERS_URL, json=user_payload()).json()["data"]

        assert "password" not in data
        assert "passwordHash" not in data

    def test_password_is_stored_hashed(self, client: TestClient, storage: Engine) -> None:
        """Test that the stored password is a bcrypt hash."""
        user_id = client.post(USERS_URL, json=user_payload()).json()["data"]["id"]

        with storage.connect() as conn:
            stored = conn.execute(text("SELECT password FROM users WHERE id = :id"), {"id": user_id}).scalar_one()

        assert stored != "SecurePass123!"
        assert stored.startswith("$2")

    def test_email_is_lowercased(self, client: TestClient) -> None:
        """Test that email addresses are normalized to lowercase."""
        response = client.post(USERS_URL, json=user_payload(email="John.Doe@Example.COM"))

        assert response.status_code == 201
        assert response.json()["data"]["email"] == "john.doe@example.com"

    def test_role_defaults_to_user(self, client: TestClient) -> None:
        """Test that role is optional and defaults to user."""
        payload = user_payload()
        del payload["role"]

        response = client.post(USERS_URL, json=payload)

        assert response.status_code == 201
        assert response.json()["data"]["role"] == "user"

    def test_invalid_email_returns_422(self, client: TestClient) -> None:
        """Test that an invalid email fails with a field error."""
        response = client.post(USERS_URL, json=user_payload(email="not-an-email"))

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert {"field": "email", "message": "Email must be a valid email address"} in body["errors"]

    def test_weak_password_returns_422(self, client: TestClient) -> None:
        """Test that the password complexity rule is enforced."""
        response = client.post(USERS_URL, json=user_payload(password="alllowercase1"))

        assert response.status_code == 422
        fields = [error["field"] for error in response.json()["errors"]]
        assert "password" in fields

    def test_missing_fields_are_all_reported(self, client: TestClient) -> None:
        """Test that every failing field is reported, not only the first."""
        response = client.post(USERS_URL, json={"password": "SecurePass123!"})

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert {"field": "name", "message": "Name is required"} in errors
        assert {"field": "email", "message": "Email is required"} in errors

    def test_unknown_field_is_rejected(self, client: TestClient) -> None:
        """Test that keys outside the schema are rejected."""
        response = client.post(USERS_URL, json=user_payload(nickname="johnny"))

        assert response.status_code == 422
        assert {"field": "nickname", "message": '"nickname" is not allowed'} in response.json()["errors"]

    def test_future_date_of_birth_is_rejected(self, client: TestClient) -> None:
        """Test that a date of birth in the future fails validation."""
        response = client.post(USERS_URL, json=user_payload(dateOfBirth="2999-01-01"))

        assert response.status_code == 422
        assert {"field": "dateOfBirth", "message": "Date of birth cannot be in the future"} in response.json()["errors"]

    def test_name_is_sanitized(self, client: TestClient) -> None:
        """Test that script tags are stripped from the name."""
        response = client.post(USERS_URL, json=user_payload(name="<script>alert(1)</script>John"))

        assert response.status_code == 201
        assert response.json()["data"]["name"] == "John"

    def test_duplicate_email_returns_400(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that a second user with the same email is refused."""
        create_user()

        response = client.post(USERS_URL, json=user_payload(name="Other John", email="JOHN@example.com"))

        assert response.status_code == 400
        assert response.json()["message"] == "User with this email already exists"


class TestGetUser:
    """Tests for GET /api/v1/users/{id}."""

    def test_get_existing_user(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that a created user can be fetched by id."""
        user = create_user()

        response = client.get(f"{USERS_URL}/{user['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User retrieved successfully"
        assert body["data"]["id"] == user["id"]
        assert body["data"]["phone"] == "+1234567890"

    def test_unknown_user_returns_404(self, client: TestClient) -> None:
        """Test that a missing id answers 404."""
        response = client.get(f"{USERS_URL}/9999")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_non_numeric_id_returns_422(self, client: TestClient) -> None:
        """Test that a non-numeric id fails parameter validation."""
        response = client.get(f"{USERS_URL}/abc")

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Parameter validation failed"
        assert body["errors"] == [{"field": "id", "message": "User ID must be a valid number"}]

    def test_zero_id_returns_404(self, client: TestClient) -> None:
        """Test that zero is a well-formed id that matches no user."""
        response = client.get(f"{USERS_URL}/0")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_out_of_range_id_returns_422(self, client: TestClient) -> None:
        """Test that ids beyond the integer column range fail parameter validation."""
        response = client.get(f"{USERS_URL}/99999999999999999999")

        assert response.status_code == 422
        assert response.json()["errors"] == [{"field": "id", "message": "User ID must be a valid number"}]


class TestListUsers:
    """Tests for GET /api/v1/users."""

    def test_empty_list(self, client: TestClient) -> None:
        """Test that an empty table lists no users with correct pagination."""
        response = client.get(USERS_URL)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Users retrieved successfully"
        assert body["data"] == []
        assert body["meta"]["pagination"] == {
            "page": 1,
            "limit": 10,
            "total": 0,
            "pages": 0,
            "hasNext": False,
            "hasPrev": False,
        }

    def test_pagination(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that page and limit slice the result and report totals."""
        for index in range(12):
            create_user(name=f"User {index:02d}", email=f"user{index}@example.com")

        response = client.get(USERS_URL, params={"page": 2, "limit": 5})

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 5
        assert body["meta"]["pagination"] == {
            "page": 2,
            "limit": 5,
            "total": 12,
            "pages": 3,
            "hasNext": True,
            "hasPrev": True,
        }

    def test_search_matches_name_and_email(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that search is a case-insensitive substring match on name or email."""
        create_user(name="Alice Walker", email="alice@example.com")
        create_user(name="Bob Stone", email="bob@walker.org")
        create_user(name="Carol King", email="carol@example.com")

        response = client.get(USERS_URL, params={"search": "WALKER"})

        emails = sorted(user["email"] for user in response.json()["data"])
        assert emails == ["alice@example.com", "bob@walker.org"]
        assert response.json()["meta"]["filters"]["search"] == "WALKER"

    def test_role_filter(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that role filters exactly."""
        create_user(email="a@example.com", role="user")
        create_user(email="m@example.com", role="moderator")

        response = client.get(USERS_URL, params={"role": "moderator"})

        data = response.json()["data"]
        assert [user["email"] for user in data] == ["m@example.com"]
        assert response.json()["meta"]["filters"]["role"] == "moderator"

    def test_sort_by_name_ascending(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that sortBy/sortOrder control ordering."""
        create_user(name="Charlie", email="c@example.com")
        create_user(name="Alice", email="a@example.com")
        create_user(name="Bob", email="b@example.com")

        response = client.get(USERS_URL, params={"sortBy": "name", "sortOrder": "asc"})

        assert [user["name"] for user in response.json()["data"]] == ["Alice", "Bob", "Charlie"]
        filters = response.json()["meta"]["filters"]
        assert filters["sortBy"] == "name"
        assert filters["sortOrder"] == "asc"

    def test_limit_above_maximum_returns_422(self, client: TestClient) -> None:
        """Test that limit is capped at 100."""
        response = client.get(USERS_URL, params={"limit": 101})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Query validation failed"
        assert body["errors"] == [{"field": "limit", "message": "Limit must be at most 100"}]

    def test_invalid_sort_field_returns_422(self, client: TestClient) -> None:
        """Test that only whitelisted sort fields are accepted."""
        response = client.get(USERS_URL, params={"sortBy": "password"})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "sortBy"

    def test_search_wildcards_match_literally(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that % and _ in the search term are plain characters, not LIKE wildcards."""
        create_user(name="Ann Lee", email="ann_lee@example.com")
        create_user(name="Bob Ray", email="bobray@example.com")

        underscore = client.get(USERS_URL, params={"search": "_"}).json()
        percent = client.get(USERS_URL, params={"search": "%"}).json()

        assert [user["email"] for user in underscore["data"]] == ["ann_lee@example.com"]
        assert percent["data"] == []
        assert percent["meta"]["pagination"]["total"] == 0

    def test_unknown_query_key_returns_422(self, client: TestClient) -> None:
        """Test that query keys outside the listing options are rejected."""
        response = client.get(USERS_URL, params={"status": "active"})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Query validation failed"
        assert body["errors"] == [{"field": "status", "message": "\"status\" is not allowed"}]

    def test_page_above_maximum_returns_422(self, client: TestClient) -> None:
        """Test that huge page numbers are rejected before reaching the database."""
        response = client.get(USERS_URL, params={"page": "100000000000000000000"})

        assert response.status_code == 422
        assert response.json()["errors"] == [{"field": "page", "message": "Page must be at most 10000000"}]

    def test_deleted_users_are_not_listed(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that soft-deleted users disappear from the list and total."""
        kept = create_user(email="kept@example.com")
        removed = create_user(email="removed@example.com")
        client.delete(f"{USERS_URL}/{removed['id']}")

        body = client.get(USERS_URL).json()

        assert [user["id"] for user in body["data"]] == [kept["id"]]
        assert body["meta"]["pagination"]["total"] == 1


class TestUpdateUser:
    """Tests for PUT /api/v1/users/{id}."""

    def test_partial_update(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that only the sent fields change."""
        user = create_user()

        response = client.put(f"{USERS_URL}/{user['id']}", json={"name": "Johnny Doe"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert response.json()["message"] == "User updated successfully"
        assert data["name"] == "Johnny Doe"
        assert data["email"] == user["email"]
        assert data["phone"] == user["phone"]

    def test_phone_can_be_cleared(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that phone accepts an explicit null."""
        user = create_user()

        response = client.put(f"{USERS_URL}/{user['id']}", json={"phone": None})

        assert response.status_code == 200
        assert response.json()["data"]["phone"] is None

    def test_name_cannot_be_null(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that required fields reject an explicit null."""
        user = create_user()

        response = client.put(f"{USERS_URL}/{user['id']}", json={"name": None})

        assert response.status_code == 422
        assert {"field": "name", "message": "Name cannot be null"} in response.json()["errors"]

    def test_empty_body_returns_422(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that an update must carry at least one field."""
        user = create_user()

        response = client.put(f"{USERS_URL}/{user['id']}", json={})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Validation failed"
        assert body["errors"][0]["message"] == "At least one field must be provided for update"

    def test_password_change_is_rehashed(self, client: TestClient, create_user: CreateUser, storage: Engine) -> None:
        """Test that a new password is stored hashed and still never returned."""
        user = create_user()

        response = client.put(f"{USERS_URL}/{user['id']}", json={"password": "NewSecret456!"})

        assert response.status_code == 200
        assert "password" not in response.json()["data"]
        with storage.connect() as conn:
            stored = conn.execute(text("SELECT password FROM users WHERE id = :id"), {"id": user["id"]}).scalar_one()
        assert stored.startswith("$2")

    def test_email_taken_by_another_user_returns_400(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that an update cannot steal another user's email."""
        create_user(email="taken@example.com")
        user = create_user(email="mine@example.com")

        response = client.put(f"{USERS_URL}/{user['id']}", json={"email": "taken@example.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "Email already exists"

    def test_keeping_own_email_is_allowed(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that re-sending the current email is not a conflict."""
        user = create_user()

        response = client.put(f"{USERS_URL}/{user['id']}", json={"email": user["email"], "role": "moderator"})

        assert response.status_code == 200
        assert response.json()["data"]["role"] == "moderator"

    def test_unknown_user_returns_404(self, client: TestClient) -> None:
        """Test that updating a missing user answers 404."""
        response = client.put(f"{USERS_URL}/9999", json={"name": "Nobody Here"})

        assert response.status_code == 404


class TestDeleteUser:
    """Tests for DELETE /api/v1/users/{id}."""

    def test_delete_returns_summary(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that delete answers with the deleted user's summary."""
        user = create_user()

        response = client.delete(f"{USERS_URL}/{user['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User deleted successfully"
        assert body["data"] == {
            "deletedUser": {"id": user["id"], "name": user["name"], "email": user["email"]}
        }

    def test_delete_is_soft(self, client: TestClient, create_user: CreateUser, storage: Engine) -> None:
        """Test that the row stays in storage flagged as deleted."""
        user = create_user()

        client.delete(f"{USERS_URL}/{user['id']}")

        assert client.get(f"{USERS_URL}/{user['id']}").status_code == 404
        with storage.connect() as conn:
            row = conn.execute(
                text("SELECT is_deleted, deleted_at, is_active FROM users WHERE id = :id"),
                {"id": user["id"]},
            ).one()
        assert bool(row.is_deleted) is True
        assert row.deleted_at is not None
        assert bool(row.is_active) is False

    def test_second_delete_returns_404(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that a deleted user cannot be deleted again."""
        user = create_user()

        assert client.delete(f"{USERS_URL}/{user['id']}").status_code == 200
        response = client.delete(f"{USERS_URL}/{user['id']}")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_deleted_user_cannot_be_updated(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that updates treat deleted users as missing."""
        user = create_user()
        client.delete(f"{USERS_URL}/{user['id']}")

        response = client.put(f"{USERS_URL}/{user['id']}", json={"name": "Ghost User"})

        assert response.status_code == 404

    def test_admin_cannot_be_deleted(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that admin users are protected from deletion."""
        admin = create_user(email="admin@example.com", role="admin")

        response = client.delete(f"{USERS_URL}/{admin['id']}")

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot delete admin users"
        assert client.get(f"{USERS_URL}/{admin['id']}").status_code == 200

    def test_email_reusable_after_delete(self, client: TestClient, create_user: CreateUser) -> None:
        """Test that a deleted user's email can be registered again."""
        user = create_user()
        client.delete(f"{USERS_URL}/{user['id']}")

        response = client.post(USERS_URL, json=user_payload(name="New John"))

        assert response.status_code == 201
        assert response.json()["data"]["id"] != user["id"]


class TestErrorHandling:
    """Tests for the central error handling."""

    def test_diagnostic_error_returns_500(self, client: TestClient) -> None:
        """Test that an unhandled exception becomes a 500 envelope."""
        response = client.get(f"{USERS_URL}/error")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Internal server error"
        assert "stack" not in body

    def test_server_keeps_serving_after_error(self, client: TestClient) -> None:
        """Test that an unhandled error does not break later requests."""
        client.get(f"{USERS_URL}/error")

        assert client.get(USERS_URL).status_code == 200

    def test_unknown_route_returns_404(self, client: TestClient) -> None:
        """Test that unknown routes answer with the error envelope."""
        response = client.get("/api/v1/nothing-here")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Route /api/v1/nothing-here not found"

    def test_method_not_allowed(self, client: TestClient) -> None:
        """Test that unsupported methods answer 405."""
        response = client.patch(USERS_URL, json={})

        assert response.status_code == 405
        assert response.json()["success"] is False

    def test_invalid_json_body(self, client: TestClient) -> None:
        """Test that a malformed JSON body is a validation failure."""
        response = client.post(
            USERS_URL,
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_request_id_header(self, client: TestClient) -> None:
        """Test that the request id is echoed or generated."""
        echoed = client.get(USERS_URL, headers={"X-Request-ID": "req-123"})
        generated = client.get(USERS_URL)

        assert echoed.headers["X-Request-ID"] == "req-123"
        assert generated.headers["X-Request-ID"]

    def test_error_code_is_logged(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that application errors log their code and details."""
        error_logger = MagicMock()
        monkeypatch.setattr("app.api.middleware.error_handling.logger", error_logger)

        response = client.get(f"{USERS_URL}/999")

        assert response.status_code == 404
        context = error_logger.info.call_args.kwargs["extra"]
        assert context["status_code"] == 404
        assert context["error_code"] == "NOT_FOUND"
        assert context["resource_type"] == "user"
        assert context["resource_id"] == "999"
