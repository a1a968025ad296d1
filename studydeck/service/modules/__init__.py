# -*- coding: utf-8 -*-
"""
studydeck/service/modules/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Импорты всех функций сервиса модулей.
"""

from .collection import (add_to_collection_service,
                         remove_from_collection_service)
from .create import create_module_service
from .read import (get_module_by_slug_service, get_module_service,
                   list_collection_service, list_my_modules_service,
                   search_public_modules_service)
from .update import (delete_module_service, update_module_service,
                     update_visibility_service)

__all__ = [
    # Создание
    "create_module_service",
    # Чтение
    "get_module_service",
    "get_module_by_slug_service",
    "list_my_modules_service",
    "list_collection_service",
    "search_public_modules_service",
    # Обновление и удаление
    "update_module_service",
    "update_visibility_service",
    "delete_module_service",
    # Коллекция
    "add_to_collection_service",
    "remove_from_collection_service",
]
