# -*- coding: utf-8 -*-
"""
studydeck/service/terms/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Добавление, изменение и удаление терминов владельцем модуля.
"""

from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.logger import configure_logger
from studydeck.repository.modules import get_module
from studydeck.repository.progress import get_progress
from studydeck.repository.terms import (create_terms, delete_term,
                                        find_term_by_text, update_term)
from studydeck.security.access_control import ensure_module_owner
from studydeck.service.progress import ensure_progress_records
from studydeck.service.projection import project_term
from studydeck.service.terms.context import resolve_term_context
from studydeck.utils.exceptions import ConflictError, ValidationError

logger = configure_logger(__name__)

DUPLICATE_TERM = "Term already exists for this module."


async def add_term_service(
    session: AsyncSession,
    user_id: int,
    module_id: int,
    term: str,
    definition: str,
    is_starred: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Добавить термин в свой модуль.

    Запись прогресса владельца создается сразу; остальные пользователи
    получат ее при следующем обращении к модулю.
    """
    module = await get_module(session, module_id)
    ensure_module_owner(module, user_id)

    term = term.strip()
    if not term:
        raise ValidationError("Term must not be empty")
    if await find_term_by_text(session, module_id, term):
        raise ConflictError(DUPLICATE_TERM)

    item: Dict[str, Any] = {"term": term, "definition": definition}
    if is_starred is not None:
        item["is_starred"] = is_starred

    try:
        (created,) = await create_terms(session, module_id, [item])
    except IntegrityError:
        await session.rollback()
        raise ConflictError(DUPLICATE_TERM)

    await ensure_progress_records(
        session, user_id, module_id, seed_from_owner_fields=True
    )
    logger.info(f"➕ Термин {created.id} добавлен в модуль {module_id}")

    progress = await get_progress(session, user_id, created.id)
    return project_term(created, progress)


async def edit_term_service(
    session: AsyncSession,
    user_id: int,
    term_id: int,
    term: Optional[str] = None,
    definition: Optional[str] = None,
) -> Dict[str, Any]:
    """Изменить текст или определение термина своего модуля."""
    context = await resolve_term_context(session, user_id, term_id)
    ensure_module_owner(context.module, user_id)

    changes: Dict[str, Any] = {}
    if term is not None:
        term = term.strip()
        if not term:
            raise ValidationError("Term must not be empty")
        if term != context.term.term:
            if await find_term_by_text(session, context.module.id, term):
                raise ConflictError(DUPLICATE_TERM)
            changes["term"] = term
    if definition is not None and definition != context.term.definition:
        changes["definition"] = definition

    updated = context.term
    if changes:
        try:
            updated = await update_term(session, term_id, **changes)
        except IntegrityError:
            await session.rollback()
            raise ConflictError(DUPLICATE_TERM)
        logger.info(f"✏️ Термин {term_id} обновлен: {sorted(changes)}")

    await ensure_progress_records(
        session, user_id, context.module.id, seed_from_owner_fields=True
    )
    progress = await get_progress(session, user_id, term_id)
    return project_term(updated, progress)


async def delete_term_service(
    session: AsyncSession, user_id: int, term_id: int
) -> None:
    """Удалить термин своего модуля вместе с прогрессом всех пользователей."""
    context = await resolve_term_context(session, user_id, term_id)
    ensure_module_owner(context.module, user_id)
    await delete_term(session, term_id)
    logger.info(f"🗑️ Термин {term_id} удален из модуля {context.module.id}")
