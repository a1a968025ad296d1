# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn с логами через loguru.
"""

import logging

from studydeck.config.logger import InterceptHandler
from studydeck.config.settings import settings


def setup_uvicorn_logging():
    """Настраивает перехват логов uvicorn, FastAPI и SQLAlchemy."""

    for logger_name in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ]:
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers = [InterceptHandler()]
        logger_obj.propagate = False

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    # Access логи дублируют middleware запросов
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)


def get_uvicorn_config():
    """Возвращает конфигурацию для uvicorn."""
    return {
        "app": "studydeck.main:app",
        "host": settings.app_host,
        "port": settings.app_port,
        "reload": False,
        "log_config": None,  # Отключаем стандартную конфигурацию логов
        "access_log": True,
        "use_colors": True,
    }
