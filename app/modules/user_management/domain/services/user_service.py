# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business rules for managing user records - who can be created,
# which changes are allowed, and which users may never be deleted.
# 🧪 Purpose (Technical Summary):
# Domain service implementing user management business logic on top of the UserRepository
# contract: email uniqueness among non-deleted users, partial updates with re-hashing,
# and soft deletion with the admin protection rule.
# 🔗 Dependencies:
# User domain model, UserRepository interface, shared exceptions
# 🔄 Connected Modules / Calls From:
# User API endpoints (via presentation dependencies), seed script

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from ..models.user import User, UserRole
from ..repositories.user_repository import UserListParams, UserRepository
from app.shared.core.exceptions import (
    BusinessRuleViolationError,
    DuplicateResourceError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for user management business logic.

    IMPORTANT: This is a domain service class used for business logic only.
    Endpoints convert the returned domain users into response schemas, so
    password hashes never reach a client.
    """

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def list_users(self, params: UserListParams) -> Tuple[List[User], int]:
        """Return one page of non-deleted users and the total match count."""
        return await self.user_repository.list(params)

    async def get_user(self, user_id: int) -> User:
        """
        Get a non-deleted user.

        Raises:
            NotFoundError: If the user does not exist or was deleted
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user

    # =========================================================================
    # USER CREATION AND LIFECYCLE
    # =========================================================================

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None
    ) -> User:
        """
        Create a new user with business rule validation.

        Args:
            name: Display name
            email: Email address
            password: Plain text password, hashed before storage
            role: Initial role
            phone: Optional phone number
            date_of_birth: Optional date of birth

        Returns:
            User: Created user domain model

        Raises:
            DuplicateResourceError: If email already exists
        """
        if await self.user_repository.get_by_email(email):
            logger.info(f"Rejected user creation, email already in use: {email}")
            raise DuplicateResourceError(
                message="User with this email already exists",
                resource_type="user",
                field="email",
            )

        user = User.create_new_user(
            name=name,
            email=email,
            password=password,
            role=role,
            phone=phone,
            date_of_birth=date_of_birth,
        )
        created = await self.user_repository.create(user)
        logger.info(f"User created: id={created.id} role={created.role.value}")
        return created

    async def update_user(self, user_id: int, changes: Dict[str, Any]) -> User:
        """
        Apply a partial update to a non-deleted user.

        Args:
            user_id: Target user
            changes: Field name to new value, using domain field names;
                ``password`` holds the new plain text password

        Raises:
            NotFoundError: If the user does not exist or was deleted
            DuplicateResourceError: If the new email belongs to another user
        """
        user = await self.get_user(user_id)

        new_email = changes.get("email")
        if new_email and new_email.lower() != user.email:
            existing = await self.user_repository.get_by_email(new_email)
            if existing and existing.id != user.id:
                raise DuplicateResourceError(
                    message="Email already exists",
                    resource_type="user",
                    field="email",
                )

        user.apply_changes(changes)
        updated = await self.user_repository.update(user)
        logger.info(f"User updated: id={user_id} fields={sorted(changes)}")
        return updated

    async def delete_user(self, user_id: int) -> User:
        """
        Soft delete a user.

        Returns:
            User: The user as it was before deletion

        Raises:
            NotFoundError: If the user does not exist or was already deleted
            BusinessRuleViolationError: If the user is an admin
        """
        user = await self.get_user(user_id)

        if user.is_admin:
            raise BusinessRuleViolationError(
                message="Cannot delete admin users",
                rule="admin_users_cannot_be_deleted",
            )

        if not await self.user_repository.soft_delete(user_id):
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)

        logger.info(f"User soft deleted: id={user_id}")
        return user
