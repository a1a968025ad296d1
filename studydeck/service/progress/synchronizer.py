# -*- coding: utf-8 -*-
"""
Ленивое создание записей коллекции и прогресса.

Записи создаются в момент первого обращения пользователя к модулю, а не
заранее для всех пользователей. Обе операции идемпотентны: повторный вызов
только читает существующие строки и ничего не пишет. Гонка двух запросов
одного пользователя (две вкладки) разрешается уникальными ключами
(user_id, module_id) и (user_id, term_id): дубликаты при вставке пропускаются.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.logger import configure_logger
from studydeck.domain.enums import TermStatus
from studydeck.domain.models import Term
from studydeck.repository.collection import add_collection_link
from studydeck.repository.progress import (insert_progress_rows,
                                           list_existing_term_ids)

logger = configure_logger(__name__)


async def ensure_collection_link(
    session: AsyncSession, user_id: int, module_id: int, is_owner: bool
) -> None:
    """
    Убедиться, что модуль числится в коллекции пользователя.

    Владельцу запись не создается: он всегда считается добавившим свой модуль.
    """
    if is_owner:
        return
    await add_collection_link(session, user_id, module_id)


async def ensure_progress_records(
    session: AsyncSession,
    user_id: int,
    module_id: int,
    seed_from_owner_fields: bool,
) -> int:
    """
    Создать недостающие записи прогресса пользователя по всем терминам модуля.

    Args:
        session: Сессия базы данных
        user_id: ID пользователя
        module_id: ID модуля
        seed_from_owner_fields: Брать начальные значения из полей термина
            (вызывающий - владелец модуля) или значения по умолчанию

    Returns:
        Количество вставленных записей (без учета пропущенных дубликатов)
    """
    result = await session.execute(
        select(Term.id, Term.status, Term.is_starred).where(
            Term.module_id == module_id
        )
    )
    terms = result.all()
    if not terms:
        return 0

    existing = await list_existing_term_ids(
        session, user_id, [row.id for row in terms]
    )

    missing = [
        {
            "user_id": user_id,
            "term_id": row.id,
            "status": row.status if seed_from_owner_fields else TermStatus.NOT_STARTED,
            "is_starred": row.is_starred if seed_from_owner_fields else False,
        }
        for row in terms
        if row.id not in existing
    ]
    if not missing:
        return 0

    await insert_progress_rows(session, missing)
    logger.debug(
        f"Созданы записи прогресса: user_id={user_id}, module_id={module_id}, "
        f"count={len(missing)}, seed_from_owner={seed_from_owner_fields}"
    )
    return len(missing)


async def ensure_user_module(
    session: AsyncSession, user_id: int, module_id: int, is_owner: bool
) -> None:
    """Связь с коллекцией, затем записи прогресса; значения владельца - из термина."""
    await ensure_collection_link(session, user_id, module_id, is_owner)
    await ensure_progress_records(
        session, user_id, module_id, seed_from_owner_fields=is_owner
    )
