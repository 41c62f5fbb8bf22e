# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the user database, making sure we can talk to our data storage
# and handing out sessions (short conversations with the database) to each request.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy engine lifecycle management: engine creation from settings,
# session factory, optional schema creation, readiness probe and orderly shutdown.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine and sessions)
# - app/shared/config/settings.py, app/shared/config/database.py
#
# 🔄 Connected Modules / Calls From:
# - app/main.py (startup / shutdown)
# - app/shared/infrastructure/database/session.py (session dependency)
# - app/api/v1/health.py (readiness probe)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.shared.config.database import DatabaseBase, DatabaseConfig
from app.shared.config.settings import get_settings

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Owns the process-wide async engine and session factory.

    Settings are read when ``initialize`` runs, not at import time, so a
    test can point the manager at a throwaway database.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._health_check_query = text("SELECT 1")

    async def initialize(self, database_url: Optional[str] = None) -> None:
        """
        Create the engine and session factory.

        Args:
            database_url: Override for the configured database URL
        """
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        settings = get_settings()
        config = DatabaseConfig(settings)
        url = database_url or config.database_url

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(url, **config.engine_kwargs)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=False,
        )

        if settings.DB_CREATE_TABLES:
            await self.create_tables()

        logger.info(f"Database connection initialized for backend '{self._engine.url.get_backend_name()}'")

    async def create_tables(self) -> None:
        """Create any missing tables registered on the declarative metadata."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        # Import models so they register on the metadata
        from app.modules.user_management.infrastructure.database import models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)
        logger.info("Database tables created")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": timestamp,
            }

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(self._health_check_query)
                result.scalar()
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database health check failed: {e}")
            return {"status": "unhealthy", "error": str(e), "timestamp": timestamp}

        logger.debug("Database health check passed")
        return {"status": "healthy", "timestamp": timestamp}

    def session(self) -> AsyncSession:
        """Open a new session bound to the managed engine."""
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._session_factory()

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the global database connection manager."""
    try:
        await db_manager.initialize()
    except Exception as e:
        logger.error(f"Failed to initialize database: {str(e)}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


async def database_health_check() -> Dict[str, Any]:
    """Run the readiness probe against the global engine."""
    return await db_manager.health_check()
