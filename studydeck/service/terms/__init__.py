# -*- coding: utf-8 -*-
"""
studydeck/service/terms/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Импорты всех функций сервиса терминов.
"""

from .context import (TermContext, resolve_progress_context,
                      resolve_term_context)
from .crud import add_term_service, delete_term_service, edit_term_service
from .progress import (get_term_progress_service, update_term_progress_service,
                       update_term_status_service)

__all__ = [
    # Контекст
    "TermContext",
    "resolve_term_context",
    "resolve_progress_context",
    # Прогресс
    "update_term_progress_service",
    "update_term_status_service",
    "get_term_progress_service",
    # Управление терминами
    "add_term_service",
    "edit_term_service",
    "delete_term_service",
]
