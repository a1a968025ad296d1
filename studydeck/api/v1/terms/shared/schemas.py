# -*- coding: utf-8 -*-
"""
studydeck/api/v1/terms/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic схемы для терминов и прогресса по ним.
"""

from typing import Optional

from pydantic import Field

from studydeck.api.v1.modules.shared.schemas import TermReadSchema
from studydeck.api.v1.shared.schemas import CamelSchema
from studydeck.domain.enums import TermStatus

__all__ = [
    "TermReadSchema",
    "TermUpdateSchema",
    "TermProgressUpdateSchema",
    "TermStatusUpdateSchema",
]


class TermUpdateSchema(CamelSchema):
    """Схема для изменения термина владельцем."""

    term: Optional[str] = Field(None, min_length=1, max_length=255)
    definition: Optional[str] = Field(None, min_length=1)


class TermProgressUpdateSchema(CamelSchema):
    """Новые значения прогресса; отсутствующие поля не меняются."""

    status: Optional[TermStatus] = None
    is_starred: Optional[bool] = None

    class Config:
        json_schema_extra = {"example": {"status": "in_progress", "isStarred": True}}


class TermStatusUpdateSchema(CamelSchema):
    """Результат попытки вспомнить термин."""

    success: bool
