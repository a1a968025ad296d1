# -*- coding: utf-8 -*-
"""
studydeck/repository/modules.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Repository for the Module catalog.

All lookups are explicit queries keyed by id, slug or owner; callers load
terms separately through ``studydeck.repository.terms``.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.logger import configure_logger
from studydeck.domain.models import Module
from studydeck.repository.base import create_item, delete_item, update_item
from studydeck.utils.exceptions import NotFoundError

logger = configure_logger(__name__)


async def create_module(
    session: AsyncSession,
    title: str,
    slug: str,
    owner_id: int,
    description: str | None = None,
    is_private: bool = True,
) -> Module:
    """Create a new module with the given attributes."""
    return await create_item(
        session,
        Module,
        title=title,
        slug=slug,
        owner_id=owner_id,
        description=description,
        is_private=is_private,
    )


async def find_module(session: AsyncSession, module_id: int) -> Optional[Module]:
    """Retrieve a module by ID or None."""
    result = await session.execute(select(Module).where(Module.id == module_id))
    return result.scalar_one_or_none()


async def get_module(session: AsyncSession, module_id: int) -> Module:
    """Retrieve a module by ID or raise NotFoundError."""
    module = await find_module(session, module_id)
    if module is None:
        raise NotFoundError(resource_type="Module", resource_id=module_id)
    return module


async def get_module_by_slug(session: AsyncSession, slug: str) -> Module:
    """Retrieve a module by slug or raise NotFoundError."""
    result = await session.execute(select(Module).where(Module.slug == slug))
    module = result.scalar_one_or_none()
    if module is None:
        raise NotFoundError(resource_type="Module", details=f"slug '{slug}'")
    return module


async def find_duplicate_module(
    session: AsyncSession,
    slug: str,
    title: str,
    exclude_id: int | None = None,
) -> Optional[Module]:
    """Find a module that already uses the slug or the title."""
    stmt = select(Module).where(or_(Module.slug == slug, Module.title == title))
    if exclude_id is not None:
        stmt = stmt.where(Module.id != exclude_id)
    result = await session.execute(stmt.limit(1))
    return result.scalars().first()


async def update_module(
    session: AsyncSession, module_id: int, **kwargs: Any
) -> Module:
    """Update an existing module, excluding immutable fields."""
    kwargs.pop("id", None)
    kwargs.pop("owner_id", None)
    return await update_item(session, Module, module_id, **kwargs)


async def delete_module(session: AsyncSession, module_id: int) -> None:
    """Delete a module; terms, links and progress go with it by cascade."""
    await delete_item(session, Module, module_id)


async def list_modules_by_owner(session: AsyncSession, owner_id: int) -> List[Module]:
    """List modules owned by the user, oldest first."""
    stmt = select(Module).where(Module.owner_id == owner_id).order_by(Module.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_modules_by_ids(
    session: AsyncSession, module_ids: Iterable[int]
) -> List[Module]:
    """List modules by a set of IDs, ordered by ID."""
    ids = set(module_ids)
    if not ids:
        return []
    stmt = select(Module).where(Module.id.in_(ids)).order_by(Module.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def search_public_modules(
    session: AsyncSession, query: str | None = None
) -> List[Module]:
    """Search public modules by a case-insensitive substring of title or description."""
    stmt = select(Module).where(Module.is_private.is_(False))

    if query:
        escaped = (
            query.lower()
            .replace("\\", "\\\\")
            .replace("%", "\\%")
            .replace("_", "\\_")
        )
        pattern = f"%{escaped}%"
        stmt = stmt.where(
            or_(
                func.lower(Module.title).like(pattern, escape="\\"),
                func.lower(func.coalesce(Module.description, "")).like(
                    pattern, escape="\\"
                ),
            )
        )

    result = await session.execute(stmt.order_by(Module.id))
    modules = list(result.scalars().all())
    logger.debug(f"Найдено публичных модулей: {len(modules)} (q={query!r})")
    return modules
