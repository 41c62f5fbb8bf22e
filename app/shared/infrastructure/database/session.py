# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives every request its own clean database session and makes sure it is rolled back
# and closed when something goes wrong.
#
# 🧪 Purpose (Technical Summary):
# FastAPI dependency yielding an AsyncSession per request; SQLAlchemy errors are rolled
# back and translated into DatabaseError, other exceptions roll back and propagate unchanged.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession)
# - app/shared/infrastructure/database/connection.py (session factory)
#
# 🔄 Connected Modules / Calls From:
# - app/modules/user_management/infrastructure/database/user_repository_impl.py

import logging
from typing import AsyncGenerator

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.core.exceptions import DatabaseError
from app.shared.infrastructure.database.connection import db_manager

logger = logging.getLogger(__name__)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.get("/users")
        async def list_users(session: AsyncSession = Depends(get_db_session)):
            ...

    Raises:
        DatabaseError: If a SQLAlchemy error escapes the request
    """
    session = db_manager.session()
    try:
        yield session
    except exc.SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Database error occurred, transaction rolled back: {e}")
        raise DatabaseError(details={"error": e.__class__.__name__}) from e
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
