# -*- coding: utf-8 -*-
"""
studydeck/service/modules/collection.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Добавление модулей в коллекцию пользователя и удаление из нее.
"""

from typing import Any, Dict, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.enums import AccessDecision
from studydeck.repository.collection import (collection_link_exists,
                                             remove_collection_link)
from studydeck.repository.modules import get_module
from studydeck.security.access_control import (check_module_access,
                                               ensure_module_access,
                                               is_module_owner)
from studydeck.service.modules.views import build_module_view
from studydeck.service.progress import ensure_user_module
from studydeck.utils.exceptions import PermissionDeniedError


async def add_to_collection_service(
    session: AsyncSession, user_id: int, module_id: int
) -> Dict[str, Any]:
    """
    Добавить публичный (или свой) модуль в коллекцию.

    Повторное добавление ничего не меняет. Записи прогресса создаются сразу:
    для владельца из полей терминов, для остальных - не начатыми.
    """
    module = await get_module(session, module_id)
    ensure_module_access(module, user_id)

    is_owner = is_module_owner(module, user_id)
    await ensure_user_module(session, user_id, module.id, is_owner=is_owner)
    logger.info(f"📥 Модуль {module_id} в коллекции пользователя {user_id}")

    return await build_module_view(
        session, module, user_id, include_terms=True, is_collected=True
    )


async def remove_from_collection_service(
    session: AsyncSession, user_id: int, module_id: int
) -> Optional[Dict[str, Any]]:
    """
    Убрать модуль из коллекции.

    Записи прогресса сохраняются и снова используются при повторном добавлении.
    Модуль, ставший приватным, может убрать только тот, у кого он уже в
    коллекции; содержимое модуля в ответ не попадает (None).
    """
    module = await get_module(session, module_id)

    if is_module_owner(module, user_id):
        raise PermissionDeniedError("Cannot remove your own module from collection")

    forbidden = check_module_access(module, user_id) is AccessDecision.FORBIDDEN
    if forbidden and not await collection_link_exists(session, user_id, module.id):
        ensure_module_access(module, user_id)

    await remove_collection_link(session, user_id, module.id)
    logger.info(f"📤 Модуль {module_id} убран из коллекции пользователя {user_id}")

    if forbidden:
        return None

    return await build_module_view(
        session, module, user_id, include_terms=True, is_collected=False
    )
