# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the parts that actually store user records in the database.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer initialization for user management: SQLAlchemy table model,
# repository implementation and demo data seeding.
# 🔗 Dependencies:
# SQLAlchemy, domain repository interfaces
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, database connection manager (table creation), Alembic

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl

__all__ = ["UserRepositoryImpl"]
