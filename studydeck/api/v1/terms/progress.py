# -*- coding: utf-8 -*-
"""
studydeck/api/v1/terms/progress.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Эндпоинты прогресса пользователя по терминам.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.api.v1.shared.schemas import ResponseEnvelope, success
from studydeck.clients.database_client import get_db
from studydeck.security.security import get_current_user_id
from studydeck.service.terms import (get_term_progress_service,
                                     update_term_progress_service,
                                     update_term_status_service)

from .shared.schemas import (TermProgressUpdateSchema, TermReadSchema,
                             TermStatusUpdateSchema)

router = APIRouter(prefix="/terms", tags=["🃏 Термины - 📊 Прогресс"])


@router.patch(
    "/{term_id}/progress",
    response_model=ResponseEnvelope[TermReadSchema],
    response_model_exclude_unset=True,
)
async def update_term_progress_endpoint(
    term_id: int,
    progress_data: TermProgressUpdateSchema,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """
    Установить статус и/или отметку термина.

    Args:
        term_id: ID термина
        progress_data: status и/или isStarred
        session: Сессия базы данных
        user_id: ID текущего пользователя

    Returns:
        Термин с обновленным прогрессом пользователя
    """
    term = await update_term_progress_service(
        session,
        user_id,
        term_id,
        status=progress_data.status,
        is_starred=progress_data.is_starred,
    )
    return success("Progress updated", term)


@router.post(
    "/{term_id}/update-status",
    response_model=ResponseEnvelope[TermReadSchema],
    response_model_exclude_unset=True,
)
async def update_term_status_endpoint(
    term_id: int,
    status_data: TermStatusUpdateSchema,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Применить результат попытки: успех повышает статус, неудача понижает."""
    term = await update_term_status_service(
        session, user_id, term_id, status_data.success
    )
    return success("Term status updated successfully", term)


@router.get(
    "/{term_id}/progress",
    response_model=ResponseEnvelope[TermReadSchema],
    response_model_exclude_unset=True,
)
async def get_term_progress_endpoint(
    term_id: int,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Прогресс текущего пользователя по термину."""
    term = await get_term_progress_service(session, user_id, term_id)
    return success("Progress retrieved", term)
