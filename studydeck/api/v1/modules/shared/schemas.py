# -*- coding: utf-8 -*-
"""
studydeck/api/v1/modules/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic схемы для работы с модулями.
"""

from typing import List, Optional

from pydantic import Field

from studydeck.api.v1.shared.schemas import CamelSchema
from studydeck.domain.enums import TermStatus


class ProgressSchema(CamelSchema):
    """Доли терминов модуля по статусам изучения."""

    not_started: float
    in_progress: float
    completed: float


class TermReadSchema(CamelSchema):
    """Термин с прогрессом текущего пользователя."""

    id: int
    module_id: int
    term: str
    definition: str
    status: TermStatus
    is_starred: bool


class ModuleReadSchema(CamelSchema):
    """Модуль глазами текущего пользователя."""

    id: int
    slug: str
    title: str
    description: Optional[str] = None
    is_private: bool
    owner_id: int
    owner_name: Optional[str] = None  # None, если владелец удален
    owner_img: Optional[str] = None
    is_owner: bool
    is_collected: bool
    terms_count: int
    progress: ProgressSchema
    terms: Optional[List[TermReadSchema]] = None  # Только в детальном ответе


class TermCreateSchema(CamelSchema):
    """Схема для добавления термина."""

    term: str = Field(..., min_length=1, max_length=255)
    definition: str = Field(..., min_length=1)
    is_starred: Optional[bool] = None

    class Config:
        json_schema_extra = {
            "example": {"term": "Митохондрия", "definition": "Органоид клетки"}
        }


class ModuleCreateSchema(CamelSchema):
    """Схема для создания модуля."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    is_private: bool = True
    terms: List[TermCreateSchema] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Биология",
                "description": "Строение клетки",
                "isPrivate": False,
                "terms": [
                    {"term": "Ядро", "definition": "Хранит генетическую информацию"},
                    {"term": "Рибосома", "definition": "Синтезирует белок"},
                ],
            }
        }


class ModuleUpdateSchema(CamelSchema):
    """Схема для обновления модуля."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    is_private: Optional[bool] = None


class ModuleVisibilitySchema(CamelSchema):
    is_private: bool
