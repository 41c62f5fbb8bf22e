# 📄 File: app/modules/user_management/infrastructure/database/seed.py
# 🧭 Purpose (Layman Explanation):
# Fills an empty database with a few example users (an administrator, a regular user and
# a moderator) so the API can be tried out right away.
# 🧪 Purpose (Technical Summary):
# Idempotent demo data seeding through UserService/UserRepositoryImpl, so seeded rows get the
# same password hashing and validation as API-created ones. Users whose email already exists
# are skipped.
# 🔗 Dependencies:
# SQLAlchemy AsyncSession, UserService, UserRepositoryImpl, app.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# python -m app.modules.user_management.infrastructure.database.seed, tests

import asyncio
import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.user import UserRole, utc_now
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.infrastructure.database.connection import close_database, db_manager, initialize_database
from app.shared.utils.logging import setup_logging

logger = logging.getLogger(__name__)

DEMO_USERS: List[Dict[str, Any]] = [
    {
        "name": "System Administrator",
        "email": "admin@example.com",
        "password": "Admin123!",
        "role": UserRole.ADMIN,
        "phone": "+1234567890",
        "email_verified": True,
    },
    {
        "name": "John Doe",
        "email": "john@example.com",
        "password": "User123!",
        "role": UserRole.USER,
        "phone": "+1234567891",
        "email_verified": False,
    },
    {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "password": "User123!",
        "role": UserRole.MODERATOR,
        "phone": "+1234567892",
        "email_verified": True,
    },
]


async def seed_demo_users(session: AsyncSession) -> int:
    """
    Insert the demo users that are not present yet.

    Args:
        session: Open database session

    Returns:
        int: Number of users created
    """
    repository = UserRepositoryImpl(session)
    service = UserService(repository)
    created = 0

    for demo in DEMO_USERS:
        if await repository.get_by_email(demo["email"]) is not None:
            logger.info(f"Demo user {demo['email']} already exists, skipping")
            continue

        user = await service.create_user(
            name=demo["name"],
            email=demo["email"],
            password=demo["password"],
            role=demo["role"],
            phone=demo["phone"],
        )
        if demo["email_verified"]:
            user.email_verified_at = utc_now()
            await repository.update(user)

        created += 1
        logger.info(f"Seeded demo user {user.email} ({user.role.value})")

    return created


async def main() -> None:
    """Seed the configured database."""
    setup_logging()
    await initialize_database()
    try:
        async with db_manager.session() as session:
            created = await seed_demo_users(session)
        logger.info(f"✅ Seeding complete: {created} user(s) created")
    finally:
        await close_database()


if __name__ == "__main__":
    asyncio.run(main())
