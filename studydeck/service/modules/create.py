# -*- coding: utf-8 -*-
"""
studydeck/service/modules/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисные функции создания модулей.
"""

from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.settings import settings
from studydeck.repository.modules import create_module, find_duplicate_module
from studydeck.repository.terms import create_terms
from studydeck.repository.users import get_user_by_id
from studydeck.service.modules.views import build_module_view
from studydeck.service.progress import ensure_user_module
from studydeck.utils.exceptions import (ConflictError, NotFoundError,
                                        ValidationError)
from studydeck.utils.slugify import slugify


async def ensure_unique_module(
    session: AsyncSession, slug: str, title: str, exclude_id: Optional[int] = None
) -> None:
    """Проверить, что slug и название не заняты другим модулем."""
    duplicate = await find_duplicate_module(session, slug, title, exclude_id)
    if duplicate is None:
        return
    if duplicate.slug == slug:
        raise ConflictError("Module slug already exists")
    raise ConflictError("Module title already exists")


def normalize_terms(terms: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Обрезать пробелы в терминах и проверить, что они не повторяются.

    Raises:
        ValidationError: Пустой термин
        ConflictError: Термин встречается дважды
    """
    normalized = []
    seen = set()
    for item in terms:
        text = item["term"].strip()
        if not text:
            raise ValidationError("Term must not be empty")
        if text in seen:
            raise ConflictError("Term already exists for this module.")
        seen.add(text)
        normalized.append({**item, "term": text})
    return normalized


async def create_module_service(
    session: AsyncSession,
    owner_id: int,
    title: str,
    description: Optional[str] = None,
    is_private: bool = True,
    terms: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Создать новый модуль.

    Args:
        session: Сессия базы данных
        owner_id: ID владельца (вызывающего пользователя)
        title: Название модуля
        description: Описание
        is_private: Приватный модуль (по умолчанию True)
        terms: Начальные термины [{"term", "definition", ...}]

    Returns:
        Представление модуля для владельца
    """
    logger.info(f"🎯 Создание модуля: title='{title}', owner_id={owner_id}")

    if await get_user_by_id(session, owner_id) is None:
        raise NotFoundError(resource_type="User", resource_id=owner_id)

    title = title.strip()
    if not title:
        raise ValidationError("Module title must not be empty")

    slug = slugify(title, settings.slug_max_length)
    await ensure_unique_module(session, slug, title)

    terms = normalize_terms(terms or [])

    try:
        module = await create_module(
            session,
            title=title,
            slug=slug,
            owner_id=owner_id,
            description=description,
            is_private=is_private,
        )
    except IntegrityError:
        # Параллельное создание модуля с тем же названием
        await session.rollback()
        raise ConflictError("Module title already exists")

    if terms:
        await create_terms(session, module.id, terms)

    await ensure_user_module(session, owner_id, module.id, is_owner=True)

    logger.info(
        f"✅ Модуль создан: id={module.id}, slug='{module.slug}', terms={len(terms)}"
    )
    return await build_module_view(
        session, module, owner_id, include_terms=True, is_collected=True
    )
