# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user records are stored in the database table, including which
# columns exist, which ones can be empty, and how email addresses are kept unique.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``users`` table: integer primary key, role CHECK constraint,
# soft-delete columns, secondary indexes and a partial unique index on email that only
# covers rows that are not soft-deleted (PostgreSQL and SQLite).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base with naming convention)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - app.shared.infrastructure.database.connection (create_all)
# - migrations/versions/001_create_users_table.py (mirrors this schema)

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    String,
    func,
    text,
)

from app.shared.config.database import DatabaseBase

USER_ROLE_VALUES = ("user", "admin", "moderator")


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(DatabaseBase):
    """
    SQLAlchemy model for user records.

    Rows are never physically removed by the API: deletion sets
    ``is_deleted`` and ``deleted_at``. Email uniqueness is enforced only
    among rows where ``is_deleted`` is false, so an address can be
    reused after its previous owner was deleted.
    """
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ('user', 'admin', 'moderator')",
            name="role_valid",
        ),
        Index(
            "uq_users_email_active",
            "email",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
    )

    # Primary identification
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier for each user"
    )

    # Identity and credentials
    name = Column(
        String(100),
        nullable=False,
        comment="Display name"
    )
    email = Column(
        String(255),
        nullable=False,
        comment="Lowercased email address, unique among non-deleted users"
    )
    password_hash = Column(
        "password",
        String(255),
        nullable=False,
        comment="Hashed password using bcrypt"
    )
    role = Column(
        String(20),
        nullable=False,
        default="user",
        index=True,
        comment="Role: user, admin or moderator"
    )

    # Contact details
    phone = Column(
        String(20),
        nullable=True,
        comment="Phone number"
    )
    date_of_birth = Column(
        Date,
        nullable=True,
        comment="Date of birth"
    )
    avatar_url = Column(
        String(500),
        nullable=True,
        comment="Avatar image URL"
    )

    # Account state
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
        comment="Account active flag"
    )
    last_login_at = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Last login timestamp"
    )
    email_verified_at = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Email verification timestamp"
    )

    # Soft delete
    is_deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Soft-delete flag"
    )
    deleted_at = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Soft-delete timestamp"
    )

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        index=True,
        comment="Record creation date"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        onupdate=func.now(),
        comment="Last modification date"
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, is_deleted={self.is_deleted})>"
