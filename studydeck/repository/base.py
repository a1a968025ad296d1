# -*- coding: utf-8 -*-
"""
studydeck/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for generic CRUD functionality.

This module provides reusable asynchronous CRUD helpers using SQLAlchemy 2.0
async ORM, with logging and basic validation, plus the idempotent
"insert if absent" primitive used by lazy progress materialization.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Type, TypeVar

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.logger import configure_logger
from studydeck.domain.models import Base
from studydeck.utils.exceptions import NotFoundError

T = TypeVar("T", bound=Base)

logger = configure_logger(__name__)

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


async def get_item(session: AsyncSession, model: Type[T], item_id: int) -> T:
    """Retrieve a single item by ID or raise NotFoundError."""
    stmt = select(model).where(getattr(model, "id") == item_id)
    result = await session.execute(stmt)
    item = result.scalars().first()
    if item is None:
        raise NotFoundError(resource_type=model.__name__, resource_id=item_id)
    return item


async def create_item(session: AsyncSession, model: Type[T], **kwargs: Any) -> T:
    """Create a new item in the database."""
    instance = model(**kwargs)
    session.add(instance)
    await session.commit()
    await session.refresh(instance)
    return instance


async def update_item(
    session: AsyncSession, model: Type[T], item_id: int, **kwargs: Any
) -> T:
    """Update an existing item in the database."""
    instance = await get_item(session, model, item_id)
    for key, value in kwargs.items():
        setattr(instance, key, value)
    await session.commit()
    await session.refresh(instance)
    return instance


async def delete_item(session: AsyncSession, model: Type[T], item_id: int) -> None:
    """Delete an item from the database."""
    instance = await get_item(session, model, item_id)
    await session.delete(instance)
    await session.commit()
    logger.info(f"Удален {model.__name__} с ID {item_id}")


async def insert_ignore_duplicates(
    session: AsyncSession,
    model: Type[Base],
    rows: Sequence[dict],
    conflict_columns: Iterable[str],
) -> None:
    """
    Bulk-insert rows, silently skipping those that violate the unique key.

    PostgreSQL and SQLite get a native ``ON CONFLICT DO NOTHING``. Other
    dialects insert inside a SAVEPOINT and treat ``IntegrityError`` as a
    concurrent insert of the same rows. The caller commits.
    """
    if not rows:
        return

    dialect = session.get_bind().dialect.name
    columns = list(conflict_columns)

    if dialect == "postgresql":
        stmt = pg_insert(model).values(list(rows)).on_conflict_do_nothing(
            index_elements=columns
        )
        await session.execute(stmt)
        return

    if dialect == "sqlite":
        stmt = sqlite_insert(model).values(list(rows)).on_conflict_do_nothing(
            index_elements=columns
        )
        await session.execute(stmt)
        return

    # Построчно, чтобы конфликт одной строки не откатывал остальные
    skipped = 0
    for row in rows:
        try:
            async with session.begin_nested():
                await session.execute(insert(model), [row])
        except IntegrityError:
            skipped += 1
    if skipped:
        logger.debug(
            f"Пропущена повторная вставка {model.__name__}: {skipped} строк"
        )
