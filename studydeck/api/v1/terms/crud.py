# -*- coding: utf-8 -*-
"""
studydeck/api/v1/terms/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Изменение и удаление терминов владельцем модуля.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.api.v1.shared.schemas import ResponseEnvelope, success
from studydeck.clients.database_client import get_db
from studydeck.security.security import get_current_user_id
from studydeck.service.terms import delete_term_service, edit_term_service

from .shared.schemas import TermReadSchema, TermUpdateSchema

router = APIRouter(prefix="/terms", tags=["🃏 Термины - ✏️ Управление"])


@router.patch(
    "/{term_id}",
    response_model=ResponseEnvelope[TermReadSchema],
    response_model_exclude_unset=True,
)
async def edit_term_endpoint(
    term_id: int,
    term_data: TermUpdateSchema,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Изменить термин своего модуля."""
    term = await edit_term_service(
        session,
        user_id,
        term_id,
        term=term_data.term,
        definition=term_data.definition,
    )
    return success("Term updated", term)


@router.delete(
    "/{term_id}", response_model=ResponseEnvelope, response_model_exclude_unset=True
)
async def delete_term_endpoint(
    term_id: int,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Удалить термин своего модуля."""
    await delete_term_service(session, user_id, term_id)
    return success("Term deleted")
