# -*- coding: utf-8 -*-
"""
Репозиторий пользователей (только чтение: владельцев модулей и вызывающих).
"""

from typing import Dict, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.models import User


async def get_user_by_id(session: AsyncSession, user_id: int) -> Optional[User]:
    """Получить пользователя по ID или None."""
    result = await session.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_users_by_ids(
    session: AsyncSession, user_ids: Iterable[int]
) -> Dict[int, User]:
    """Получить пользователей пачкой, словарь {id: User}."""
    ids = set(user_ids)
    if not ids:
        return {}
    result = await session.execute(select(User).where(User.id.in_(ids)))
    return {user.id: user for user in result.scalars().all()}
