# -*- coding: utf-8 -*-
"""
studydeck/api/v1/modules/management/terms.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Добавление терминов в модуль.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.api.v1.shared.schemas import ResponseEnvelope, success
from studydeck.clients.database_client import get_db
from studydeck.security.security import get_current_user_id
from studydeck.service.terms import add_term_service

from ..shared.schemas import TermCreateSchema, TermReadSchema

router = APIRouter(prefix="/modules", tags=["🗂️ Модули - 🃏 Термины"])


@router.post(
    "/{module_id}/terms",
    response_model=ResponseEnvelope[TermReadSchema],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def add_term_endpoint(
    module_id: int,
    term_data: TermCreateSchema,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Добавить термин в свой модуль."""
    term = await add_term_service(
        session,
        user_id,
        module_id,
        term=term_data.term,
        definition=term_data.definition,
        is_starred=term_data.is_starred,
    )
    return success("Term created", term)
