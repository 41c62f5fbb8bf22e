# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user records, like creating new users,
# finding and listing existing users, updating their information, and marking them deleted.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository interface using SQLAlchemy ORM, providing async
# database operations with a soft-delete default predicate, search/filter/sort/pagination
# query building, unique-index violation translation, and error handling and logging.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.user_repository (interface)
# - app.modules.user_management.domain.models.user (domain model)
# - app.modules.user_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.domain.services.user_service (user service operations)
# - app.modules.user_management.presentation.dependencies (FastAPI wiring)

"""
User Repository Implementation

This module provides the concrete implementation of the UserRepository interface
using SQLAlchemy for database operations. It handles the mapping between
domain User entities and UserModel database records.

Features:
- Soft-deleted rows are excluded from every query built here
- Case-insensitive search over name and email with literal ``%`` and ``_``
- Stable ordering (requested column, then id) for pagination
- Mutations are flushed and committed before returning
"""

import logging
from typing import Any, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from app.modules.user_management.domain.models.user import User, UserRole
from app.modules.user_management.domain.repositories.user_repository import UserListParams, UserRepository
from app.modules.user_management.infrastructure.database.models import UserModel
from app.shared.core.exceptions import DatabaseError, DuplicateResourceError, NotFoundError
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "name": UserModel.name,
    "email": UserModel.email,
    "created_at": UserModel.created_at,
    "updated_at": UserModel.updated_at,
}


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.

    This repository handles all database operations for user entities,
    providing async operations with proper error handling and logging.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    def _active_users(self) -> Select:
        """Base query every lookup starts from: non-deleted users only."""
        return select(UserModel).where(UserModel.is_deleted.is_(False))

    async def _get_model(self, user_id: int, operation: str) -> Optional[UserModel]:
        stmt = self._active_users().where(UserModel.id == user_id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise DatabaseError(operation=operation, table=UserModel.__tablename__) from e
        return result.scalar_one_or_none()

    async def _commit(self, operation: str, email: Optional[str] = None) -> None:
        """
        Flush and commit pending changes.

        Raises:
            DuplicateResourceError: If the partial unique email index rejects the write
            DatabaseError: For any other database failure
        """
        try:
            await self._session.flush()
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"User {operation} rejected by unique constraint (email={email}): {e.orig}")
            raise DuplicateResourceError(
                message="User with this email already exists",
                resource_type="user",
                field="email",
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during user {operation}: {str(e)}")
            raise DatabaseError(operation=operation, table=UserModel.__tablename__) from e

    async def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: Domain User entity to create

        Returns:
            User: Created user entity with generated ID

        Raises:
            DuplicateResourceError: If a non-deleted user already owns the email
            DatabaseError: For other database errors
        """
        user_model = self._domain_to_model(user)
        self._session.add(user_model)
        await self._commit("create", user.email)

        logger.info(f"Created user with ID: {user_model.id}")
        return self._model_to_domain(user_model)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Retrieve a non-deleted user by ID.

        Returns:
            Optional[User]: User entity if found, None otherwise
        """
        user_model = await self._get_model(user_id, "get_by_id")
        if user_model is None:
            logger.debug(f"User not found: {user_id}")
            return None
        return self._model_to_domain(user_model)

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            stmt = self._active_users().where(UserModel.email == email.lower())
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by email: {str(e)}")
            raise DatabaseError(operation="get_by_email", table=UserModel.__tablename__) from e

        return self._model_to_domain(user_model) if user_model else None

    async def list(self, params: UserListParams) -> Tuple[List[User], int]:
        """
        List non-deleted users with search, role filter, sorting and pagination.

        Args:
            params: Listing options

        Returns:
            Tuple[List[User], int]: The requested page and the total match count
        """
        conditions: List[Any] = [UserModel.is_deleted.is_(False)]

        if params.search:
            pattern = f"%{_escape_like(params.search)}%"
            conditions.append(
                or_(
                    UserModel.name.ilike(pattern, escape="\\"),
                    UserModel.email.ilike(pattern, escape="\\"),
                )
            )
        if params.role:
            conditions.append(UserModel.role == UserRole(params.role).value)

        sort_column = SORTABLE_COLUMNS.get(params.sort_by, UserModel.created_at)
        if params.sort_order == "asc":
            ordering = (sort_column.asc(), UserModel.id.asc())
        else:
            ordering = (sort_column.desc(), UserModel.id.desc())

        count_stmt = select(func.count(UserModel.id)).where(*conditions)
        page_stmt = (
            select(UserModel)
            .where(*conditions)
            .order_by(*ordering)
            .offset(params.offset)
            .limit(params.limit)
        )

        try:
            total = (await self._session.execute(count_stmt)).scalar_one()
            result = await self._session.execute(page_stmt)
            user_models = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list users: {e}")
            raise DatabaseError(operation="list", table=UserModel.__tablename__) from e

        logger.debug(f"Listed {len(user_models)} of {total} users (page={params.page}, limit={params.limit})")
        return [self._model_to_domain(m) for m in user_models], total

    async def update(self, user: User) -> User:
        """
        Update an existing, non-deleted user.

        Args:
            user: Domain User entity with updated data

        Returns:
            User: Updated user entity

        Raises:
            NotFoundError: If the user does not exist or was deleted meanwhile
            DatabaseError: For database failures
        """
        user_model = await self._get_model(user.id, "update")
        if user_model is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user.id)

        self._update_model_from_domain(user_model, user)
        await self._commit("update", user.email)

        logger.info(f"Updated user: {user.id}")
        return self._model_to_domain(user_model)

    async def soft_delete(self, user_id: int) -> bool:
        """
        Flag a user as deleted without removing the row.

        Returns:
            bool: True if user was flagged, False if not found
        """
        user_model = await self._get_model(user_id, "delete")
        if user_model is None:
            logger.debug(f"User not found for deletion: {user_id}")
            return False

        user = self._model_to_domain(user_model)
        user.soft_delete()
        self._update_model_from_domain(user_model, user)
        await self._commit("delete")

        logger.info(f"Soft deleted user: {user_id}")
        return True

    def _domain_to_model(self, user: User) -> UserModel:
        """
        Convert a domain User entity to a UserModel.

        Args:
            user: Domain User entity

        Returns:
            UserModel: SQLAlchemy model instance
        """
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email.lower(),
            password_hash=user.password_hash,
            role=UserRole(user.role).value,
            phone=user.phone,
            date_of_birth=user.date_of_birth,
            avatar_url=user.avatar_url,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
            email_verified_at=user.email_verified_at,
            is_deleted=user.is_deleted,
            deleted_at=user.deleted_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _model_to_domain(self, user_model: UserModel) -> User:
        """
        Convert a UserModel to a domain User entity.

        Args:
            user_model: SQLAlchemy model instance

        Returns:
            User: Domain User entity
        """
        return User.model_validate(user_model)

    def _update_model_from_domain(self, user_model: UserModel, user: User) -> None:
        """
        Update a UserModel instance with data from a domain User entity.

        Args:
            user_model: SQLAlchemy model instance to update
            user: Domain User entity with new data
        """
        user_model.name = user.name
        user_model.email = user.email.lower()
        user_model.password_hash = user.password_hash
        user_model.role = UserRole(user.role).value
        user_model.phone = user.phone
        user_model.date_of_birth = user.date_of_birth
        user_model.avatar_url = user.avatar_url
        user_model.is_active = user.is_active
        user_model.last_login_at = user.last_login_at
        user_model.email_verified_at = user.email_verified_at
        user_model.is_deleted = user.is_deleted
        user_model.deleted_at = user.deleted_at
        user_model.updated_at = user.updated_at
