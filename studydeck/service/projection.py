# -*- coding: utf-8 -*-
"""
Сборка внешнего представления модулей и терминов.

Словари строятся явно по списку разрешенных полей: поля термина status и
is_starred (прогресс владельца) в представление не попадают, вместо них
отдается прогресс запрашивающего пользователя.
"""
from typing import Any, Dict, List, Mapping, Optional, Sequence

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import Module, Term, User, UserTermProgress
from studydeck.service.progress.aggregation import ProgressBreakdown


def project_term(
    term: Term, progress: Optional[UserTermProgress] = None
) -> Dict[str, Any]:
    """Термин с прогрессом пользователя; без записи - не начат и без звезды."""
    return {
        "id": term.id,
        "module_id": term.module_id,
        "term": term.term,
        "definition": term.definition,
        "status": TermStatus(progress.status) if progress else TermStatus.NOT_STARTED,
        "is_starred": bool(progress.is_starred) if progress else False,
    }


def project_terms(
    terms: Sequence[Term],
    progress_by_term: Optional[Mapping[int, UserTermProgress]] = None,
) -> List[Dict[str, Any]]:
    """Список терминов; progress_by_term=None для модуля вне коллекции."""
    progress_by_term = progress_by_term or {}
    return [project_term(term, progress_by_term.get(term.id)) for term in terms]


def project_module(
    module: Module,
    owner: Optional[User],
    terms: Sequence[Term],
    progress: ProgressBreakdown,
    *,
    is_owner: bool,
    is_collected: bool,
    term_views: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Представление модуля для конкретного пользователя.

    Args:
        module: Модуль
        owner: Владелец (None, если пользователь удален)
        terms: Термины модуля
        progress: Агрегированный прогресс пользователя
        is_owner: Запрашивающий - владелец
        is_collected: Модуль в коллекции запрашивающего
        term_views: Термины с прогрессом (только для детального представления)
    """
    view = {
        "id": module.id,
        "slug": module.slug,
        "title": module.title,
        "description": module.description,
        "is_private": module.is_private,
        "owner_id": module.owner_id,
        "owner_name": owner.name if owner else None,
        "owner_img": owner.profile_picture if owner else None,
        "is_owner": is_owner,
        "is_collected": is_collected,
        "terms_count": len(terms),
        "progress": progress.as_dict(),
    }
    if term_views is not None:
        view["terms"] = term_views
    return view
