# -*- coding: utf-8 -*-
"""
studydeck/api/v1/modules/crud/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Эндпоинты для получения модулей.

Статические пути (/me, /collection, /public, /slug/...) объявлены раньше
/{module_id}.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.api.v1.shared.schemas import ResponseEnvelope, success
from studydeck.clients.database_client import get_db
from studydeck.security.security import get_current_user_id
from studydeck.service.modules import (get_module_by_slug_service,
                                       get_module_service,
                                       list_collection_service,
                                       list_my_modules_service,
                                       search_public_modules_service)

from ..shared.schemas import ModuleReadSchema

router = APIRouter(prefix="/modules", tags=["🗂️ Модули - 📖 Чтение"])


@router.get(
    "/me",
    response_model=ResponseEnvelope[List[ModuleReadSchema]],
    response_model_exclude_unset=True,
)
async def list_my_modules_endpoint(
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Модули текущего пользователя с его прогрессом."""
    modules = await list_my_modules_service(session, user_id)
    return success("Modules retrieved", modules)


@router.get(
    "/collection",
    response_model=ResponseEnvelope[List[ModuleReadSchema]],
    response_model_exclude_unset=True,
)
async def list_collection_endpoint(
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Модули, добавленные текущим пользователем в коллекцию."""
    modules = await list_collection_service(session, user_id)
    return success("Collection retrieved", modules)


@router.get(
    "/public",
    response_model=ResponseEnvelope[List[ModuleReadSchema]],
    response_model_exclude_unset=True,
)
async def search_public_modules_endpoint(
    q: Optional[str] = Query(None, description="Поиск по названию и описанию"),
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """
    Поиск публичных модулей.

    Args:
        q: Подстрока (без учета регистра); пустая - все публичные модули
        session: Сессия базы данных
        user_id: ID текущего пользователя

    Returns:
        Список модулей с прогрессом текущего пользователя
    """
    modules = await search_public_modules_service(session, user_id, q)
    return success("Public modules retrieved", modules)


@router.get(
    "/slug/{slug}",
    response_model=ResponseEnvelope[ModuleReadSchema],
    response_model_exclude_unset=True,
)
async def get_module_by_slug_endpoint(
    slug: str,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Детальная информация о модуле по slug."""
    module = await get_module_by_slug_service(session, user_id, slug)
    return success("Module retrieved", module)


@router.get(
    "/{module_id}",
    response_model=ResponseEnvelope[ModuleReadSchema],
    response_model_exclude_unset=True,
)
async def get_module_endpoint(
    module_id: int,
    session: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Детальная информация о модуле с терминами и прогрессом пользователя."""
    module = await get_module_service(session, user_id, module_id)
    return success("Module retrieved", module)
