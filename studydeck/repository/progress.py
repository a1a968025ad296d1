# -*- coding: utf-8 -*-
"""
Репозиторий прогресса пользователей по терминам.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Set

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.models import UserTermProgress
from studydeck.repository.base import insert_ignore_duplicates


async def get_progress(
    session: AsyncSession, user_id: int, term_id: int
) -> Optional[UserTermProgress]:
    """
    Получить прогресс пользователя по термину.

    Args:
        session: Сессия базы данных
        user_id: ID пользователя
        term_id: ID термина

    Returns:
        Запись прогресса или None
    """
    stmt = select(UserTermProgress).where(
        UserTermProgress.user_id == user_id,
        UserTermProgress.term_id == term_id,
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def list_progress(
    session: AsyncSession, user_id: int, term_ids: Iterable[int]
) -> List[UserTermProgress]:
    """Все записи прогресса пользователя по набору терминов."""
    ids = set(term_ids)
    if not ids:
        return []
    stmt = select(UserTermProgress).where(
        UserTermProgress.user_id == user_id,
        UserTermProgress.term_id.in_(ids),
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_progress_map(
    session: AsyncSession, user_id: int, term_ids: Iterable[int]
) -> Dict[int, UserTermProgress]:
    """Прогресс пользователя по терминам в виде словаря {term_id: запись}."""
    rows = await list_progress(session, user_id, term_ids)
    return {row.term_id: row for row in rows}


async def list_existing_term_ids(
    session: AsyncSession, user_id: int, term_ids: Iterable[int]
) -> Set[int]:
    """ID терминов, для которых у пользователя уже есть запись прогресса."""
    ids = set(term_ids)
    if not ids:
        return set()
    stmt = select(UserTermProgress.term_id).where(
        UserTermProgress.user_id == user_id,
        UserTermProgress.term_id.in_(ids),
    )
    result = await session.execute(stmt)
    return set(result.scalars().all())


async def insert_progress_rows(session: AsyncSession, rows: Sequence[dict]) -> None:
    """Вставить записи прогресса, пропуская уже существующие пары (user, term)."""
    await insert_ignore_duplicates(
        session,
        UserTermProgress,
        rows,
        conflict_columns=("user_id", "term_id"),
    )
    await session.commit()


async def save_progress(
    session: AsyncSession, progress: UserTermProgress
) -> UserTermProgress:
    """Сохранить изменения записи прогресса."""
    session.add(progress)
    await session.commit()
    await session.refresh(progress)
    return progress
