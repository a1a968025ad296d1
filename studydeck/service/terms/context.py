# -*- coding: utf-8 -*-
"""
studydeck/service/terms/context.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Разрешение термина в модуль с проверкой доступа.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.logger import configure_logger
from studydeck.domain.models import Module, Term
from studydeck.repository.collection import collection_link_exists
from studydeck.repository.modules import get_module
from studydeck.repository.terms import get_term
from studydeck.security.access_control import (ensure_module_access,
                                               is_module_owner)
from studydeck.service.progress import ensure_progress_records
from studydeck.utils.exceptions import PermissionDeniedError

logger = configure_logger(__name__)


@dataclass
class TermContext:
    term: Term
    module: Module
    is_owner: bool
    is_collected: bool


async def resolve_term_context(
    session: AsyncSession, user_id: int, term_id: int
) -> TermContext:
    """Термин, его модуль и отношение пользователя к модулю (без записи в БД)."""
    term = await get_term(session, term_id)
    module = await get_module(session, term.module_id)
    ensure_module_access(module, user_id)

    is_owner = is_module_owner(module, user_id)
    is_collected = is_owner or await collection_link_exists(
        session, user_id, module.id
    )
    return TermContext(term, module, is_owner, is_collected)


async def resolve_progress_context(
    session: AsyncSession, user_id: int, term_id: int
) -> TermContext:
    """
    Подготовить изменение прогресса по термину.

    Не добавивший модуль пользователь получает PermissionDeniedError.
    Перед возвратом создаются недостающие записи прогресса по модулю.
    """
    context = await resolve_term_context(session, user_id, term_id)
    if not context.is_collected:
        logger.warning(
            f"❌ Пользователь {user_id} меняет прогресс по термину {term_id} "
            f"без модуля {context.module.id} в коллекции"
        )
        raise PermissionDeniedError("Add the module to your collection first")

    await ensure_progress_records(
        session,
        user_id,
        context.module.id,
        seed_from_owner_fields=context.is_owner,
    )
    return context
