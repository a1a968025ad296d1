# -*- coding: utf-8 -*-
"""
Модуль для работы с прогрессом пользователей по модулям и терминам.

Экспортирует синхронизацию записей, агрегацию и переходы статусов.
"""

from studydeck.service.progress.aggregation import (ProgressBreakdown,
                                                    aggregate_progress,
                                                    aggregate_progress_batch,
                                                    default_breakdown)
from studydeck.service.progress.synchronizer import (ensure_collection_link,
                                                     ensure_progress_records,
                                                     ensure_user_module)
from studydeck.service.progress.transitions import (apply_transition,
                                                    next_status)

__all__ = [
    # Синхронизация
    "ensure_collection_link",
    "ensure_progress_records",
    "ensure_user_module",
    # Агрегация
    "ProgressBreakdown",
    "aggregate_progress",
    "aggregate_progress_batch",
    "default_breakdown",
    # Переходы статусов
    "apply_transition",
    "next_status",
]
