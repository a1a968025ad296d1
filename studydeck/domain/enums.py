# -*- coding: utf-8 -*-
"""
studydeck/domain/enums.py
~~~~~~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена studydeck.

Этот модуль содержит роли пользователей и статусы изучения терминов.
"""

import enum


class Role(str, enum.Enum):
    """Роли, доступные в системе."""

    ADMIN = "admin"
    USER = "user"


class TermStatus(str, enum.Enum):
    """Состояния изучения термина пользователем."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AccessDecision(str, enum.Enum):
    """Результат проверки доступа к модулю."""

    ALLOWED = "allowed"
    FORBIDDEN = "forbidden"
