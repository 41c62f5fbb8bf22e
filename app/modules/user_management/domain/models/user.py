# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" record is in our API - their name, email, role, contact details and
# whether the account is active or has been deleted
# 🧪 Purpose (Technical Summary):
# Domain model for the User entity with role enumeration, soft-delete lifecycle and partial
# update merging; carries the password hash, which never leaves the domain/infrastructure layers
# 🔗 Dependencies:
# pydantic, datetime, typing, app.shared.core.security
# 🔄 Connected Modules / Calls From:
# user_service.py, user_repository.py, user_repository_impl.py, seed.py

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.shared.core.security import get_password_hash


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserRole(str, Enum):
    """User role enumeration"""
    USER = "user"
    ADMIN = "admin"
    MODERATOR = "moderator"


class User(BaseModel):
    """
    User domain model.

    ``id`` is assigned by the database on insert, so it is ``None`` for
    a user that has not been persisted yet. A soft-deleted user keeps its
    row: ``is_deleted`` is set together with ``deleted_at`` and the
    account is deactivated.
    """

    model_config = ConfigDict(validate_assignment=True, from_attributes=True)

    # Identity
    id: Optional[int] = None
    name: str
    email: str
    password_hash: str

    # Authorization and contact details
    role: UserRole = UserRole.USER
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    avatar_url: Optional[str] = None

    # Account state
    is_active: bool = True
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None
    email_verified_at: Optional[datetime] = None

    # Tracking
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Business Logic Methods

    @classmethod
    def create_new_user(
        cls,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None
    ) -> "User":
        """
        Create a new, not yet persisted user with a hashed password.

        Args:
            name: Display name
            email: Email address (lowercased)
            password: Plain text password (will be hashed)
            role: Initial role, defaults to ``user``
            phone: Optional phone number
            date_of_birth: Optional date of birth

        Returns:
            New User instance
        """
        return cls(
            name=name,
            email=email.lower(),
            password_hash=get_password_hash(password),
            role=role,
            phone=phone,
            date_of_birth=date_of_birth,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """
        Merge a partial update into the user.

        ``password`` is hashed before it is stored; unknown keys are ignored.
        """
        for field, value in changes.items():
            if field == "password":
                self.password_hash = get_password_hash(value)
            elif field == "email":
                self.email = value.lower()
            elif field in type(self).model_fields and field not in ("id", "password_hash"):
                setattr(self, field, value)
        self.updated_at = utc_now()

    def soft_delete(self) -> None:
        """Soft delete user account."""
        now = utc_now()
        self.is_deleted = True
        self.deleted_at = now
        self.is_active = False
        self.updated_at = now
