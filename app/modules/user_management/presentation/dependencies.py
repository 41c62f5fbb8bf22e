# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# This file wires the user endpoints to the business rules and the database, so each request
# gets a ready-to-use user service backed by its own database session.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies building the UserService over the SQLAlchemy
# UserRepositoryImpl, which itself receives the per-request AsyncSession.
# 🔗 Dependencies:
# FastAPI Depends, user repository implementation, user domain service
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.users

from fastapi import Depends

from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl


def get_user_repository(repository: UserRepositoryImpl = Depends()) -> UserRepository:
    """Provide the SQLAlchemy-backed user repository for the current request."""
    return repository


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Provide the user domain service for the current request."""
    return UserService(user_repository)
