# -*- coding: utf-8 -*-
"""
studydeck/api/v1/modules/crud/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Эндпоинты для создания модулей.
"""

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.api.v1.shared.schemas import ResponseEnvelope, success
from studydeck.clients.database_client import get_db
from studydeck.security.security import get_current_user_id
from studydeck.service.modules import create_module_service

from ..shared.schemas import ModuleCreateSchema, ModuleReadSchema

router = APIRouter(prefix="/modules", tags=["🗂️ Модули - ➕ Создание"])


@router.post(
    "",
    response_model=ResponseEnvelope[ModuleReadSchema],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_module_endpoint(
    module_data: ModuleCreateSchema,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """
    Создать новый модуль от имени текущего пользователя.

    Args:
        module_data: Название, описание, видимость и начальные термины
        session: Сессия базы данных
        user_id: ID текущего пользователя

    Returns:
        Созданный модуль с терминами и прогрессом владельца
    """
    logger.info(
        f"📝 Создание модуля: title='{module_data.title}', terms={len(module_data.terms)}"
    )
    module = await create_module_service(
        session=session,
        owner_id=user_id,
        title=module_data.title,
        description=module_data.description,
        is_private=module_data.is_private,
        terms=[term.model_dump(exclude_none=True) for term in module_data.terms],
    )
    return success("Module created", module)
