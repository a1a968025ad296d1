# -*- coding: utf-8 -*-
"""
Менеджер миграций для автоматической проверки и применения миграций.
"""

import asyncio
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from studydeck.clients.database_client import async_engine
from studydeck.config.logger import configure_logger
from studydeck.config.settings import settings

logger = configure_logger()

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def get_alembic_config() -> Config:
    """Конфигурация Alembic из alembic.ini в корне проекта."""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return config


async def get_current_migration_version() -> Optional[str]:
    """
    Получает текущую версию миграции из базы данных.

    Returns:
        Текущая версия или None, если миграции еще не применялись
    """
    async with async_engine.connect() as conn:
        return await conn.run_sync(
            lambda sync_conn: MigrationContext.configure(
                sync_conn
            ).get_current_revision()
        )


def get_latest_migration_version() -> Optional[str]:
    """Последняя версия миграции по файлам в alembic/versions."""
    script = ScriptDirectory.from_config(get_alembic_config())
    return script.get_current_head()


def run_migrations() -> None:
    """Применить миграции до head."""
    command.upgrade(get_alembic_config(), "head")


async def check_and_apply_migrations() -> None:
    """
    Проверяет и применяет миграции при необходимости.

    Ошибки миграций логируются и прерывают запуск приложения.
    """
    if not settings.auto_migrate:
        logger.info("⚙️ AUTO_MIGRATE=false, автоприменение миграций отключено")
        return

    current_version = await get_current_migration_version()
    latest_version = get_latest_migration_version()

    if current_version == latest_version:
        logger.info("✅ Миграции актуальны")
        return

    if current_version is None:
        logger.info("🔄 База данных пустая, применяем миграции...")
    else:
        logger.info(
            f"🔄 Обнаружены новые миграции: {current_version} -> {latest_version}"
        )

    # Alembic работает через синхронный движок, event loop не блокируем
    await asyncio.to_thread(run_migrations)
    logger.info("✅ Миграции успешно применены")
