# -*- coding: utf-8 -*-
"""
Машина состояний изучения термина.

Успешная попытка повышает статус на один уровень, неуспешная - понижает
на один уровень:

    not_started --ok--> in_progress --ok--> completed
    completed --fail--> in_progress --fail--> not_started

Крайние состояния при движении за границу не меняются.
"""
from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.config.logger import configure_logger
from studydeck.domain.enums import TermStatus
from studydeck.domain.models import UserTermProgress
from studydeck.repository.progress import save_progress

logger = configure_logger(__name__)

_ORDER = (TermStatus.NOT_STARTED, TermStatus.IN_PROGRESS, TermStatus.COMPLETED)


def next_status(current: TermStatus, success: bool) -> TermStatus:
    """Следующий статус после попытки."""
    index = _ORDER.index(TermStatus(current))
    if success:
        return _ORDER[min(index + 1, len(_ORDER) - 1)]
    return _ORDER[max(index - 1, 0)]


async def apply_transition(
    session: AsyncSession, progress: UserTermProgress, success: bool
) -> Tuple[UserTermProgress, bool]:
    """
    Применить попытку к записи прогресса.

    Запись сохраняется только при изменении статуса.

    Returns:
        (запись, изменился ли статус)
    """
    current = TermStatus(progress.status)
    new = next_status(current, success)
    if new == current:
        logger.debug(
            f"Статус термина {progress.term_id} не изменился ({current.value})"
        )
        return progress, False

    progress.status = new
    saved = await save_progress(session, progress)
    logger.info(
        f"{'⬆️' if success else '⬇️'} Статус термина {progress.term_id} "
        f"пользователя {progress.user_id}: {current.value} -> {new.value}"
    )
    return saved, True
