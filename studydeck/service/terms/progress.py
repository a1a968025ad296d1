# -*- coding: utf-8 -*-
"""
studydeck/service/terms/progress.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Прогресс пользователя по отдельным терминам.
"""

from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.logger import configure_logger
from studydeck.domain.enums import TermStatus
from studydeck.domain.models import UserTermProgress
from studydeck.repository.progress import get_progress, save_progress
from studydeck.service.progress import (apply_transition,
                                        ensure_progress_records)
from studydeck.service.projection import project_term
from studydeck.service.terms.context import (resolve_progress_context,
                                             resolve_term_context)
from studydeck.utils.exceptions import NotFoundError

logger = configure_logger(__name__)


async def _get_progress_record(
    session: AsyncSession, user_id: int, term_id: int
) -> UserTermProgress:
    progress = await get_progress(session, user_id, term_id)
    if progress is None:
        # Термин удален между синхронизацией и чтением
        raise NotFoundError(resource_type="Term", resource_id=term_id)
    return progress


async def update_term_progress_service(
    session: AsyncSession,
    user_id: int,
    term_id: int,
    status: Optional[TermStatus] = None,
    is_starred: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Установить статус и/или отметку термина для пользователя.

    Args:
        session: Сессия базы данных
        user_id: ID пользователя
        term_id: ID термина
        status: Новый статус (None - не менять)
        is_starred: Новая отметка (None - не менять)

    Returns:
        Термин с прогрессом пользователя
    """
    context = await resolve_progress_context(session, user_id, term_id)
    progress = await _get_progress_record(session, user_id, term_id)

    changed = False
    if status is not None and TermStatus(progress.status) != status:
        progress.status = status
        changed = True
    if is_starred is not None and progress.is_starred != is_starred:
        progress.is_starred = is_starred
        changed = True

    if changed:
        progress = await save_progress(session, progress)
        logger.info(
            f"📝 Прогресс термина {term_id} пользователя {user_id}: "
            f"status={TermStatus(progress.status).value}, is_starred={progress.is_starred}"
        )

    return project_term(context.term, progress)


async def update_term_status_service(
    session: AsyncSession, user_id: int, term_id: int, success: bool
) -> Dict[str, Any]:
    """Применить результат попытки (успех/неудача) к статусу термина."""
    context = await resolve_progress_context(session, user_id, term_id)
    progress = await _get_progress_record(session, user_id, term_id)
    progress, _ = await apply_transition(session, progress, success)
    return project_term(context.term, progress)


async def get_term_progress_service(
    session: AsyncSession, user_id: int, term_id: int
) -> Dict[str, Any]:
    """
    Прогресс пользователя по термину.

    Для публичного модуля вне коллекции возвращаются значения по умолчанию
    без обращения к таблице прогресса.
    """
    context = await resolve_term_context(session, user_id, term_id)
    if not context.is_collected:
        return project_term(context.term)

    await ensure_progress_records(
        session,
        user_id,
        context.module.id,
        seed_from_owner_fields=context.is_owner,
    )
    progress = await get_progress(session, user_id, term_id)
    return project_term(context.term, progress)
