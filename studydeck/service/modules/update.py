# -*- coding: utf-8 -*-
"""
studydeck/service/modules/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисные функции обновления и удаления модулей (только владелец).
"""

from typing import Any, Dict, Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.settings import settings
from studydeck.repository.modules import (delete_module, get_module,
                                          update_module)
from studydeck.security.access_control import ensure_module_owner
from studydeck.service.modules.create import ensure_unique_module
from studydeck.service.modules.views import build_module_view
from studydeck.utils.exceptions import ConflictError, ValidationError
from studydeck.utils.slugify import slugify


async def update_module_service(
    session: AsyncSession,
    user_id: int,
    module_id: int,
    title: Optional[str] = None,
    description: Optional[str] = None,
    is_private: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Обновить поля своего модуля.

    Смена названия пересчитывает slug и повторно проверяет уникальность.
    Поля со значением None не меняются.
    """
    module = await get_module(session, module_id)
    ensure_module_owner(module, user_id)

    changes: Dict[str, Any] = {}
    if title is not None:
        title = title.strip()
        if not title:
            raise ValidationError("Module title must not be empty")
        if title != module.title:
            slug = slugify(title, settings.slug_max_length)
            await ensure_unique_module(session, slug, title, exclude_id=module.id)
            changes.update(title=title, slug=slug)
    if description is not None:
        changes["description"] = description
    if is_private is not None:
        changes["is_private"] = is_private

    if changes:
        try:
            module = await update_module(session, module_id, **changes)
        except IntegrityError:
            await session.rollback()
            raise ConflictError("Module title already exists")
        logger.info(f"✏️ Модуль {module_id} обновлен: {sorted(changes)}")

    return await build_module_view(
        session, module, user_id, include_terms=True, is_collected=True
    )


async def update_visibility_service(
    session: AsyncSession, user_id: int, module_id: int, is_private: bool
) -> Dict[str, Any]:
    """Сделать свой модуль приватным или публичным."""
    module = await get_module(session, module_id)
    ensure_module_owner(module, user_id)

    if module.is_private != is_private:
        module = await update_module(session, module_id, is_private=is_private)
        logger.info(
            f"👁️ Видимость модуля {module_id}: {'private' if is_private else 'public'}"
        )

    return await build_module_view(
        session, module, user_id, include_terms=True, is_collected=True
    )


async def delete_module_service(
    session: AsyncSession, user_id: int, module_id: int
) -> None:
    """Удалить свой модуль вместе с терминами, коллекциями и прогрессом."""
    module = await get_module(session, module_id)
    ensure_module_owner(module, user_id)
    await delete_module(session, module_id)
    logger.info(f"🗑️ Модуль {module_id} удален владельцем {user_id}")
