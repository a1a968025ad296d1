# -*- coding: utf-8 -*-
"""
studydeck/api/v1/terms/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Основной роутер для операций с терминами.
"""

from fastapi import APIRouter

from . import crud as terms_crud
from . import progress as terms_progress

router = APIRouter()

router.include_router(terms_progress.router)
router.include_router(terms_crud.router)
