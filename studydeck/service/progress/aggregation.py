# -*- coding: utf-8 -*-
"""
Модуль для агрегации прогресса пользователя по модулю.

Результат - доли терминов в трех статусах: not_started, in_progress, completed.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import Term, UserTermProgress
from studydeck.repository.progress import list_progress


@dataclass(frozen=True)
class ProgressBreakdown:
    """Доли терминов модуля по статусам."""

    not_started: float = 0.0
    in_progress: float = 0.0
    completed: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {
            TermStatus.NOT_STARTED.value: self.not_started,
            TermStatus.IN_PROGRESS.value: self.in_progress,
            TermStatus.COMPLETED.value: self.completed,
        }


def default_breakdown(terms_count: int) -> ProgressBreakdown:
    """Все термины не начаты; для пустого модуля - все нули."""
    return ProgressBreakdown(not_started=1.0 if terms_count else 0.0)


def count_statuses(
    term_ids: Iterable[int], rows: Iterable[UserTermProgress]
) -> Dict[TermStatus, int]:
    """
    Посчитать термины по статусам.

    Термин без записи прогресса считается не начатым, поэтому сумма
    счетчиков всегда равна числу терминов.
    """
    status_by_term = {row.term_id: TermStatus(row.status) for row in rows}
    counts = {status: 0 for status in TermStatus}
    for term_id in term_ids:
        counts[status_by_term.get(term_id, TermStatus.NOT_STARTED)] += 1
    return counts


def breakdown_from_rows(
    terms: Sequence[Term], rows: Sequence[UserTermProgress]
) -> ProgressBreakdown:
    """Построить доли по уже загруженным записям прогресса."""
    total = len(terms)
    if not total or not rows:
        return default_breakdown(total)

    counts = count_statuses([term.id for term in terms], rows)
    return ProgressBreakdown(
        not_started=counts[TermStatus.NOT_STARTED] / total,
        in_progress=counts[TermStatus.IN_PROGRESS] / total,
        completed=counts[TermStatus.COMPLETED] / total,
    )


async def aggregate_progress(
    session: AsyncSession,
    user_id: int,
    module_id: int,
    terms: Sequence[Term],
    is_collected: bool,
) -> ProgressBreakdown:
    """
    Рассчитать прогресс пользователя по модулю.

    Args:
        session: Сессия базы данных
        user_id: ID пользователя
        module_id: ID модуля (для единообразия вызовов; термины уже загружены)
        terms: Термины модуля
        is_collected: Модуль принадлежит пользователю или добавлен в коллекцию

    Returns:
        ProgressBreakdown. Для не добавленного модуля записи прогресса не
        читаются и не создаются; синхронизацию вызывающий код выполняет заранее.
    """
    if not is_collected or not terms:
        return default_breakdown(len(terms))

    rows = await list_progress(session, user_id, [term.id for term in terms])
    return breakdown_from_rows(terms, rows)


async def aggregate_progress_batch(
    session: AsyncSession,
    user_id: int,
    terms_by_module: Dict[int, Sequence[Term]],
    collected_module_ids: Iterable[int],
) -> Dict[int, ProgressBreakdown]:
    """Рассчитать прогресс по нескольким модулям одним запросом к прогрессу."""
    collected = set(collected_module_ids)
    term_ids = [
        term.id
        for module_id, terms in terms_by_module.items()
        if module_id in collected
        for term in terms
    ]
    rows = await list_progress(session, user_id, term_ids)

    rows_by_module: Dict[int, list] = {}
    module_by_term = {
        term.id: module_id
        for module_id, terms in terms_by_module.items()
        for term in terms
    }
    for row in rows:
        rows_by_module.setdefault(module_by_term[row.term_id], []).append(row)

    return {
        module_id: (
            breakdown_from_rows(terms, rows_by_module.get(module_id, []))
            if module_id in collected
            else default_breakdown(len(terms))
        )
        for module_id, terms in terms_by_module.items()
    }
