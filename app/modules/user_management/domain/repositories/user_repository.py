# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update, and delete user records in the database without specifying the actual database technology
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for User entities; every default query excludes soft-deleted users
# 🔗 Dependencies:
# Domain models (User, UserRole), typing, abc
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..models.user import User, UserRole


@dataclass(frozen=True)
class UserListParams:
    """Filtering, sorting and paging options for listing users."""
    page: int = 1
    limit: int = 10
    search: Optional[str] = None
    role: Optional[UserRole] = None
    sort_by: str = "created_at"
    sort_order: str = "desc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not database models
    - Soft-deleted users are invisible to every method below
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create

        Returns:
            Created User entity with generated fields populated

        Raises:
            DuplicateResourceError: If a non-deleted user already owns the email
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get a non-deleted user by ID.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a non-deleted user by email address.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(self, params: UserListParams) -> Tuple[List[User], int]:
        """
        List users matching the filters.

        Args:
            params: Search, role filter, sort and pagination

        Returns:
            (page of users, total number of matching users)
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Raises:
            NotFoundError: If the user does not exist or is soft-deleted
            DuplicateResourceError: If the new email is already taken
        """
        pass

    @abstractmethod
    async def soft_delete(self, user_id: int) -> bool:
        """
        Flag a user as deleted.

        Returns:
            True if a user was flagged, False if none was found
        """
        pass
