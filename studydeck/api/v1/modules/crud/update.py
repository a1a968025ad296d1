# -*- coding: utf-8 -*-
"""
studydeck/api/v1/modules/crud/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Эндпоинты для обновления и удаления модулей.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.api.v1.shared.schemas import ResponseEnvelope, success
from studydeck.clients.database_client import get_db
from studydeck.security.security import get_current_user_id
from studydeck.service.modules import (delete_module_service,
                                       update_module_service,
                                       update_visibility_service)

from ..shared.schemas import (ModuleReadSchema, ModuleUpdateSchema,
                              ModuleVisibilitySchema)

router = APIRouter(prefix="/modules", tags=["🗂️ Модули - ✏️ Обновление"])


@router.patch(
    "/{module_id}",
    response_model=ResponseEnvelope[ModuleReadSchema],
    response_model_exclude_unset=True,
)
async def update_module_endpoint(
    module_id: int,
    module_data: ModuleUpdateSchema,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """
    Обновить свой модуль.

    Args:
        module_id: ID модуля
        module_data: Изменяемые поля (отсутствующие не меняются)
        session: Сессия базы данных
        user_id: ID текущего пользователя

    Returns:
        Обновленный модуль
    """
    module = await update_module_service(
        session,
        user_id,
        module_id,
        title=module_data.title,
        description=module_data.description,
        is_private=module_data.is_private,
    )
    return success("Module updated", module)


@router.patch(
    "/{module_id}/visibility",
    response_model=ResponseEnvelope[ModuleReadSchema],
    response_model_exclude_unset=True,
)
async def update_visibility_endpoint(
    module_id: int,
    visibility: ModuleVisibilitySchema,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Переключить видимость своего модуля."""
    module = await update_visibility_service(
        session, user_id, module_id, visibility.is_private
    )
    return success("Visibility updated", module)


@router.delete(
    "/{module_id}", response_model=ResponseEnvelope, response_model_exclude_unset=True
)
async def delete_module_endpoint(
    module_id: int,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Удалить свой модуль."""
    await delete_module_service(session, user_id, module_id)
    return success("Module deleted")
