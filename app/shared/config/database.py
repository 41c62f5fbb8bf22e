# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the user database, deciding how many connections
# to keep open and which options the database driver needs.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async engine configuration with environment-specific pooling,
# driver-specific connect arguments (asyncpg vs aiosqlite), and the declarative
# base class with a constraint naming convention shared by models and migrations.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine and declarative base
# - app.shared.config.settings
# - asyncpg (PostgreSQL) / aiosqlite (local and test databases)
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.connection
# - app.modules.user_management.infrastructure.database.models
# - migrations/env.py

from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from .settings import Settings


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Database configuration class with environment-specific settings."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def database_url(self) -> str:
        """Get the database URL for async connections."""
        return self.settings.database_url

    @property
    def is_sqlite(self) -> bool:
        """True when the configured backend is SQLite."""
        return make_url(self.database_url).get_backend_name() == "sqlite"

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on environment and driver."""

        base_config: Dict[str, Any] = {
            "echo": self.settings.DB_ECHO,
        }

        if self.is_sqlite:
            # SQLite has no server-side pool worth tuning
            base_config["poolclass"] = NullPool
            return base_config

        base_config.update({
            "pool_size": self.settings.DB_POOL_SIZE,
            "max_overflow": self.settings.DB_MAX_OVERFLOW,
            "pool_timeout": self.settings.DB_POOL_TIMEOUT,
            "pool_recycle": self.settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,  # Verify connections before use
            "connect_args": {
                "server_settings": {
                    "application_name": f"user_api_{self.settings.ENVIRONMENT}",
                    "jit": "off",
                },
                "command_timeout": 60,
            },
        })

        if self.settings.is_production:
            base_config["connect_args"]["server_settings"].update({
                "timezone": "UTC",
                "statement_timeout": "300000",  # 5 minutes
                "idle_in_transaction_session_timeout": "300000",
            })

        return base_config


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides common metadata configuration so Alembic autogenerate and
    ``create_all`` produce identically named constraints.
    """
    metadata = metadata
