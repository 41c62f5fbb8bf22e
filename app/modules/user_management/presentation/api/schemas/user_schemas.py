# 📄 File: app/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the exact shape of the data clients send to and receive from the user
# endpoints, and refuses anything that is missing, malformed, or not allowed.
#
# 🧪 Purpose (Technical Summary):
# Pydantic v2 request/response schemas with camelCase aliases: create/update bodies with
# field rules and sanitizing, the list query model (pagination, search, role, sort), and
# response schemas that structurally exclude the password.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - app.shared.utils.validators (email, phone, password, date of birth, sanitizing)
# - app.modules.user_management.domain.models.user (UserRole, User)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.users (user endpoints)
# - FastAPI automatic request validation

"""
User Management API Schemas

Request Schemas:
- UserCreateRequest: New user payload
- UserUpdateRequest: Partial update payload (at least one field)
- UserListQuery: Query string for the list endpoint

Response Schemas:
- UserResponse: User record without any password material
- UserDeleteResponse: Summary of the deleted user
"""

from datetime import date, datetime
from typing import Annotated, Any, Dict, Literal, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.modules.user_management.domain.models.user import User, UserRole
from app.modules.user_management.domain.repositories.user_repository import UserListParams
from app.shared.utils.validators import (
    MAX_PAGE,
    sanitize_input,
    validate_date_of_birth,
    validate_email_address,
    validate_password_strength,
    validate_phone_number,
)

SanitizedName = Annotated[str, BeforeValidator(sanitize_input), Field(min_length=2, max_length=50)]

# camelCase query/body value -> repository column key
SORT_FIELD_MAP = {
    "name": "name",
    "email": "email",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

_NULL_MESSAGES = {
    "name": "Name cannot be null",
    "email": "Email cannot be null",
    "password": "Password cannot be null",
    "role": "Role cannot be null",
    "is_active": "isActive cannot be null",
}


class RequestSchema(BaseModel):
    """Base for request bodies: camelCase keys only, unknown keys rejected."""
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class UserCreateRequest(RequestSchema):
    """
    New user payload.

    ``role`` defaults to ``user``; ``phone`` and ``dateOfBirth`` are optional.
    """

    name: SanitizedName = Field(description="Display name", examples=["John Doe"])
    email: str = Field(max_length=255, description="Email address", examples=["john@example.com"])
    password: str = Field(
        min_length=8,
        max_length=128,
        description="Password with upper, lower, digit and one of @$!%*?&",
        examples=["SecurePass123!"],
    )
    role: UserRole = Field(default=UserRole.USER, description="User role")
    phone: Optional[str] = Field(default=None, max_length=20, examples=["+1234567890"])
    date_of_birth: Optional[date] = Field(default=None, examples=["1990-01-15"])

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        return validate_email_address(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return validate_password_strength(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return validate_phone_number(v)

    @field_validator("date_of_birth")
    @classmethod
    def validate_dob(cls, v: Optional[date]) -> Optional[date]:
        return validate_date_of_birth(v)


class UserUpdateRequest(RequestSchema):
    """
    Partial update payload.

    Only the keys present in the body are applied. ``phone`` and
    ``dateOfBirth`` may be cleared with ``null``; the other fields may not.
    """

    name: Optional[SanitizedName] = None
    email: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(default=None, min_length=8, max_length=128)
    role: Optional[UserRole] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    date_of_birth: Optional[date] = None
    is_active: Optional[bool] = None

    @field_validator("name", "email", "password", "role", "is_active", mode="before")
    @classmethod
    def reject_null(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            raise ValueError(_NULL_MESSAGES[info.field_name])
        return v

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: Optional[str]) -> Optional[str]:
        return validate_email_address(v) if v is not None else v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> Optional[str]:
        return validate_password_strength(v) if v is not None else v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        return validate_phone_number(v)

    @field_validator("date_of_birth")
    @classmethod
    def validate_dob(cls, v: Optional[date]) -> Optional[date]:
        return validate_date_of_birth(v)

    @model_validator(mode="after")
    def require_at_least_one_field(self) -> "UserUpdateRequest":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self

    def to_changes(self) -> Dict[str, Any]:
        """Fields explicitly sent by the client, keyed by domain field name."""
        return self.model_dump(exclude_unset=True)


class UserListQuery(BaseModel):
    """Query string accepted by ``GET /users``."""
    model_config = ConfigDict(extra="forbid")

    page: int = Field(default=1, ge=1, le=MAX_PAGE, description="1-based page number")
    limit: int = Field(default=10, ge=1, le=100, description="Page size (max 100)")
    search: Optional[
        Annotated[str, BeforeValidator(sanitize_input), Field(min_length=1, max_length=100)]
    ] = Field(default=None, description="Search in name and email")
    role: Optional[UserRole] = Field(default=None, description="Exact role filter")
    sort_by: Literal["name", "email", "createdAt", "updatedAt"] = Field(default="createdAt", alias="sortBy")
    sort_order: Literal["asc", "desc"] = Field(default="desc", alias="sortOrder")

    def to_params(self) -> UserListParams:
        return UserListParams(
            page=self.page,
            limit=self.limit,
            search=self.search,
            role=self.role,
            sort_by=SORT_FIELD_MAP[self.sort_by],
            sort_order=self.sort_order,
        )

    def filters_meta(self) -> Dict[str, Any]:
        """Echo of the applied filters for ``meta.filters``."""
        return {
            "search": self.search or None,
            "role": self.role.value if self.role else None,
            "sortBy": self.sort_by,
            "sortOrder": self.sort_order,
        }


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class UserResponse(BaseModel):
    """
    User record as returned by the API.

    There is no password field on this schema, so a hash can never be
    serialized even by accident.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    email: str
    role: UserRole
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    avatar_url: Optional[str] = None
    is_active: bool
    last_login_at: Optional[datetime] = None
    email_verified_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls.model_validate(user.model_dump())


class DeletedUserSummary(BaseModel):
    id: int
    name: str
    email: str


class UserDeleteResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    deleted_user: DeletedUserSummary

    @classmethod
    def from_domain(cls, user: User) -> "UserDeleteResponse":
        return cls(deleted_user=DeletedUserSummary(id=user.id, name=user.name, email=user.email))
