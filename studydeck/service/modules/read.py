# -*- coding: utf-8 -*-
"""
studydeck/service/modules/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисные функции чтения модулей.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.enums import AccessDecision
from studydeck.domain.models import Module
from studydeck.repository.collection import (collection_link_exists,
                                             list_collected_module_ids)
from studydeck.repository.modules import (get_module, get_module_by_slug,
                                          list_modules_by_ids,
                                          list_modules_by_owner,
                                          search_public_modules)
from studydeck.security.access_control import (check_module_access,
                                               ensure_module_access,
                                               is_module_owner)
from studydeck.service.modules.views import (build_module_view,
                                             build_module_views)
from studydeck.service.progress import ensure_user_module


async def list_my_modules_service(
    session: AsyncSession, user_id: int
) -> List[Dict[str, Any]]:
    """Модули, созданные пользователем, с его прогрессом."""
    modules = await list_modules_by_owner(session, user_id)
    return await build_module_views(session, modules, user_id)


async def list_collection_service(
    session: AsyncSession, user_id: int
) -> List[Dict[str, Any]]:
    """
    Модули, добавленные пользователем в коллекцию, с его прогрессом.

    Модули, ставшие приватными после добавления, в список не попадают.
    """
    module_ids = await list_collected_module_ids(session, user_id)
    modules = [
        module
        for module in await list_modules_by_ids(session, module_ids)
        if check_module_access(module, user_id) is AccessDecision.ALLOWED
    ]
    # Порядок добавления в коллекцию
    position = {module_id: index for index, module_id in enumerate(module_ids)}
    modules.sort(key=lambda module: position[module.id])
    return await build_module_views(session, modules, user_id)


async def search_public_modules_service(
    session: AsyncSession, user_id: int, query: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Поиск публичных модулей по подстроке в названии или описании."""
    query = query.strip() if query else None
    modules = await search_public_modules(session, query or None)
    return await build_module_views(session, modules, user_id)


async def _module_detail(
    session: AsyncSession, module: Module, user_id: int
) -> Dict[str, Any]:
    ensure_module_access(module, user_id)

    is_owner = is_module_owner(module, user_id)
    is_collected = is_owner or await collection_link_exists(
        session, user_id, module.id
    )
    if is_collected:
        await ensure_user_module(session, user_id, module.id, is_owner=is_owner)

    return await build_module_view(
        session, module, user_id, include_terms=True, is_collected=is_collected
    )


async def get_module_service(
    session: AsyncSession, user_id: int, module_id: int
) -> Dict[str, Any]:
    """
    Получить модуль с терминами и прогрессом пользователя.

    Args:
        session: Сессия базы данных
        user_id: ID пользователя
        module_id: ID модуля

    Returns:
        Детальное представление модуля

    Raises:
        NotFoundError: Модуль не найден
        PermissionDeniedError: Модуль приватный и принадлежит другому пользователю
    """
    module = await get_module(session, module_id)
    return await _module_detail(session, module, user_id)


async def get_module_by_slug_service(
    session: AsyncSession, user_id: int, slug: str
) -> Dict[str, Any]:
    """Получить модуль по slug; правила доступа те же, что и по ID."""
    module = await get_module_by_slug(session, slug)
    return await _module_detail(session, module, user_id)
