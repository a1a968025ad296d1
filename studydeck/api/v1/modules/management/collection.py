# -*- coding: utf-8 -*-
"""
studydeck/api/v1/modules/management/collection.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Эндпоинты коллекции пользователя.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.api.v1.shared.schemas import ResponseEnvelope, success
from studydeck.clients.database_client import get_db
from studydeck.security.security import get_current_user_id
from studydeck.service.modules import (add_to_collection_service,
                                       remove_from_collection_service)

from ..shared.schemas import ModuleReadSchema

router = APIRouter(prefix="/modules", tags=["🗂️ Модули - 📥 Коллекция"])


@router.post(
    "/{module_id}/collect",
    response_model=ResponseEnvelope[ModuleReadSchema],
    response_model_exclude_unset=True,
)
async def add_to_collection_endpoint(
    module_id: int,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Добавить публичный или свой модуль в коллекцию."""
    module = await add_to_collection_service(session, user_id, module_id)
    return success("Module added to collection", module)


@router.delete(
    "/{module_id}/collect",
    response_model=ResponseEnvelope[ModuleReadSchema],
    response_model_exclude_unset=True,
)
async def remove_from_collection_endpoint(
    module_id: int,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Убрать чужой модуль из коллекции."""
    module = await remove_from_collection_service(session, user_id, module_id)
    return success("Module removed from collection", module)
