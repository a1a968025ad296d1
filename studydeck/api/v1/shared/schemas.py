# -*- coding: utf-8 -*-
"""
studydeck/api/v1/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие Pydantic схемы API: базовая модель с camelCase и конверт ответа.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelSchema(BaseModel):
    """Базовая схема: JSON в camelCase, вход принимает оба варианта имен."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ResponseEnvelope(BaseModel, Generic[T]):
    """Конверт ответа {ok, message, data?, error?}."""

    ok: bool
    message: str
    data: Optional[T] = None
    error: Optional[str] = None


def success(message: str, data=None) -> dict:
    """Успешный ответ; data опускается, если не передана."""
    payload = {"ok": True, "message": message}
    if data is not None:
        payload["data"] = data
    return payload


def failure(message: str, error: str, data=None) -> dict:
    """Ответ с ошибкой для обработчиков исключений."""
    payload = {"ok": False, "message": message, "error": error}
    if data is not None:
        payload["data"] = data
    return payload
