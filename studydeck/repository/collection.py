# -*- coding: utf-8 -*-
"""
Репозиторий коллекций: какие модули пользователь добавил к себе.

Владелец модуля считается добавившим его без записи в таблице.
"""

from typing import Iterable, List, Set

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.models import UserModule
from studydeck.repository.base import insert_ignore_duplicates


async def collection_link_exists(
    session: AsyncSession, user_id: int, module_id: int
) -> bool:
    """Проверить наличие записи о добавлении модуля пользователем."""
    stmt = select(UserModule.id).where(
        UserModule.user_id == user_id, UserModule.module_id == module_id
    )
    result = await session.execute(stmt.limit(1))
    return result.scalar_one_or_none() is not None


async def get_collected_module_ids(
    session: AsyncSession, user_id: int, module_ids: Iterable[int]
) -> Set[int]:
    """Вернуть подмножество module_ids, добавленных пользователем."""
    ids = set(module_ids)
    if not ids:
        return set()
    stmt = select(UserModule.module_id).where(
        UserModule.user_id == user_id, UserModule.module_id.in_(ids)
    )
    result = await session.execute(stmt)
    return set(result.scalars().all())


async def list_collected_module_ids(session: AsyncSession, user_id: int) -> List[int]:
    """Все модули в коллекции пользователя в порядке добавления."""
    stmt = (
        select(UserModule.module_id)
        .where(UserModule.user_id == user_id)
        .order_by(UserModule.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def add_collection_link(
    session: AsyncSession, user_id: int, module_id: int
) -> None:
    """Добавить запись коллекции; повторная вставка игнорируется."""
    await insert_ignore_duplicates(
        session,
        UserModule,
        [{"user_id": user_id, "module_id": module_id}],
        conflict_columns=("user_id", "module_id"),
    )
    await session.commit()


async def remove_collection_link(
    session: AsyncSession, user_id: int, module_id: int
) -> None:
    """Удалить модуль из коллекции пользователя."""
    await session.execute(
        delete(UserModule).where(
            UserModule.user_id == user_id, UserModule.module_id == module_id
        )
    )
    await session.commit()
