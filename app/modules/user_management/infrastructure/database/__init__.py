# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the database table definition and the code that reads and writes user rows.
# 🧪 Purpose (Technical Summary):
# Database infrastructure for user management: UserModel table, UserRepositoryImpl and seed data.
# Imports are deferred so loading the table metadata does not pull in the FastAPI session dependency.
# 🔗 Dependencies:
# SQLAlchemy async ORM
# 🔄 Connected Modules / Calls From:
# app.shared.infrastructure.database.connection, migrations/env.py, presentation dependencies

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.infrastructure.database.models import UserModel
    from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl

__all__ = [
    "UserModel",
    "UserRepositoryImpl",
]
