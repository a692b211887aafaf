"""Shared utilities for SQLAlchemy repositories."""

from typing import Union

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession


def _message(error: IntegrityError) -> str:
    return str(error.orig if error.orig is not None else error).lower()


def violates_unique(error: IntegrityError, table: str, column: str) -> bool:
    """
    Tell whether ``error`` comes from the unique constraint on ``table.column``.

    SQLite reports the column (``UNIQUE constraint failed: roles.name``),
    PostgreSQL the constraint name (``uq_roles_name``), so both are checked.
    """
    message = _message(error)
    return f"{table}.{column}" in message or f"uq_{table}_{column}" in message


def violates_primary_key(error: IntegrityError, table: str) -> bool:
    message = _message(error)
    return f"{table}.id" in message or f"{table}_pkey" in message


def violates_foreign_key(error: IntegrityError) -> bool:
    return "foreign key" in _message(error)


async def sync_id_sequence(
    executor: Union[AsyncConnection, AsyncSession],
    dialect_name: str,
    table: str,
) -> None:
    """
    Move the serial sequence of ``table.id`` past the highest stored id.

    Rows inserted with an explicit id do not advance a PostgreSQL sequence,
    so the next store-assigned id could collide with them. Other backends
    derive new ids from the table itself and need nothing.
    """
    if dialect_name != "postgresql":
        return
    await executor.execute(
        text(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
            f"(SELECT MAX(id) FROM {table}))"
        ),
    )
