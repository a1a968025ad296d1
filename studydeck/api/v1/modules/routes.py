# -*- coding: utf-8 -*-
"""
studydeck/api/v1/modules/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Основной роутер для всех операций с модулями.
Объединяет маршруты CRUD, коллекции и терминов модуля.
"""

from fastapi import APIRouter

from .crud import create as crud_create
from .crud import read as crud_read
from .crud import update as crud_update
from .management import collection as management_collection
from .management import terms as management_terms

router = APIRouter()

# Добавление маршрутов CRUD операций
router.include_router(crud_create.router)
router.include_router(crud_read.router)
router.include_router(crud_update.router)

# Добавление маршрутов управления
router.include_router(management_collection.router)
router.include_router(management_terms.router)
