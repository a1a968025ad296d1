# -*- coding: utf-8 -*-
"""
studydeck/service/modules/views.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Построение представлений модулей для пользователя.

Порядок внутри запроса фиксирован: сначала синхронизация записей прогресса,
затем агрегация и сборка ответа. Иначе агрегат мог бы увидеть частично
созданные записи.
"""

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.enums import AccessDecision
from studydeck.domain.models import Module
from studydeck.repository.collection import (collection_link_exists,
                                             get_collected_module_ids)
from studydeck.repository.progress import get_progress_map
from studydeck.repository.terms import (list_terms_by_module,
                                        list_terms_by_modules)
from studydeck.repository.users import get_user_by_id, get_users_by_ids
from studydeck.security.access_control import (check_module_access,
                                               is_module_owner)
from studydeck.service.progress import (aggregate_progress,
                                        aggregate_progress_batch,
                                        ensure_progress_records)
from studydeck.service.projection import project_module, project_terms


async def build_module_view(
    session: AsyncSession,
    module: Module,
    user_id: int,
    include_terms: bool = False,
    is_collected: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Собрать представление одного модуля.

    Args:
        session: Сессия базы данных
        module: Модуль (доступ уже проверен)
        user_id: ID запрашивающего пользователя
        include_terms: Добавить термины с прогрессом пользователя
        is_collected: Уже известный признак коллекции; None - определить по БД

    Returns:
        Словарь представления модуля
    """
    is_owner = is_module_owner(module, user_id)
    if is_collected is None:
        is_collected = is_owner or await collection_link_exists(
            session, user_id, module.id
        )

    terms = await list_terms_by_module(session, module.id)

    if is_collected and terms:
        await ensure_progress_records(
            session, user_id, module.id, seed_from_owner_fields=is_owner
        )

    progress = await aggregate_progress(
        session, user_id, module.id, terms, is_collected
    )
    owner = await get_user_by_id(session, module.owner_id)

    term_views = None
    if include_terms:
        progress_by_term = (
            await get_progress_map(session, user_id, [term.id for term in terms])
            if is_collected
            else None
        )
        term_views = project_terms(terms, progress_by_term)

    return project_module(
        module,
        owner,
        terms,
        progress,
        is_owner=is_owner,
        is_collected=is_collected,
        term_views=term_views,
    )


async def build_module_views(
    session: AsyncSession, modules: Sequence[Module], user_id: int
) -> List[Dict[str, Any]]:
    """Собрать краткие представления списка модулей пакетными запросами."""
    if not modules:
        return []

    module_ids = [module.id for module in modules]
    owners = await get_users_by_ids(session, {module.owner_id for module in modules})
    linked_ids = await get_collected_module_ids(session, user_id, module_ids)
    terms_by_module = await list_terms_by_modules(session, module_ids)

    collected_ids = {
        module.id
        for module in modules
        if check_module_access(module, user_id) is AccessDecision.ALLOWED
        and (is_module_owner(module, user_id) or module.id in linked_ids)
    }

    # Синхронизация последовательно: одна сессия не допускает параллельных запросов
    for module in modules:
        if module.id in collected_ids and terms_by_module.get(module.id):
            await ensure_progress_records(
                session,
                user_id,
                module.id,
                seed_from_owner_fields=is_module_owner(module, user_id),
            )

    progress_by_module = await aggregate_progress_batch(
        session,
        user_id,
        {module.id: terms_by_module.get(module.id, []) for module in modules},
        collected_ids,
    )

    return [
        project_module(
            module,
            owners.get(module.owner_id),
            terms_by_module.get(module.id, []),
            progress_by_module[module.id],
            is_owner=is_module_owner(module, user_id),
            is_collected=module.id in collected_ids,
        )
        for module in modules
    ]
