"""Database initialization utilities."""

import logging

from sqlalchemy import insert, or_, select
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from usermgmt.domain.role import get_initial_roles

# Import models to register with Base.metadata
from usermgmt.infrastructure.persistence.sqlalchemy.models import Base, RoleModel
from usermgmt.infrastructure.persistence.sqlalchemy.repositories._utils import (
    sync_id_sequence,
)

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def seed_roles(conn: AsyncConnection) -> int:
    """
    Insert the initial roles that are not stored yet.

    A seed role counts as present when its id or its name is already taken;
    present rows are never touched. Rows go through Core inserts, so the
    fixed seed timestamps are kept as defined.

    Returns
    -------
    Number of roles inserted
    """
    roles = get_initial_roles()

    stmt = select(RoleModel.id, RoleModel.name).where(
        or_(
            RoleModel.id.in_([role.id for role in roles]),
            RoleModel.name.in_([role.name for role in roles]),
        ),
    )
    result = await conn.execute(stmt)
    taken_ids: set[int] = set()
    taken_names: set[str] = set()
    for role_id, name in result.all():
        taken_ids.add(role_id)
        taken_names.add(name)

    missing = []
    for role in roles:
        if role.id in taken_ids:
            continue
        if role.name in taken_names:
            logger.warning(
                "Seed role '%s' skipped: name already used by another role",
                role.name,
            )
            continue
        missing.append(role)

    if not missing:
        logger.debug("Initial roles already present")
        return 0

    await conn.execute(
        insert(RoleModel.__table__),
        [
            {
                "id": role.id,
                "name": role.name,
                "guid": role.guid,
                "created_on": role.created_on,
                "updated_on": role.updated_on,
            }
            for role in missing
        ],
    )

    await sync_id_sequence(conn, conn.dialect.name, RoleModel.__tablename__)

    logger.info(
        "Seeded initial roles: %s",
        ", ".join(role.name for role in missing),
    )
    return len(missing)


async def initialize_database(engine: AsyncEngine) -> int:
    """Create missing tables and seed the initial roles.

    Returns
    -------
    Number of seed roles inserted
    """
    await create_tables(engine)

    async with engine.begin() as conn:
        return await seed_roles(conn)


async def reset_database(engine: AsyncEngine) -> int:
    """Drop all tables, recreate them and seed the initial roles."""
    await drop_tables(engine)
    return await initialize_database(engine)
