# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных PostgreSQL.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

from studydeck.config.settings import settings
from studydeck.domain.models import Base

# Создаем асинхронный движок; каждая операция с БД в запросе - отдельный await
async_engine = create_async_engine(
    settings.database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://"),
    echo=False,  # Отключаем логирование SQL запросов в продакшене
    pool_pre_ping=True,  # Проверяем соединение перед использованием
    pool_recycle=3600,  # Переподключаемся каждый час
)

# Создаем фабрику асинхронных сессий
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Предоставляет асинхронную сессию базы данных для внедрения зависимостей в FastAPI.

    Yields:
        AsyncSession: Активная сессия базы данных

    Raises:
        SQLAlchemyError: Ошибки подключения к базе данных
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """
    Инициализирует базу данных, создавая все определенные таблицы.

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
    """
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
