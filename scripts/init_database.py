#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт инициализации базы данных для локальной разработки.

Выполняет:
1. Применение миграций
2. Создание пользователя (если его еще нет)
3. Вывод access-токена этого пользователя для запросов к API
"""

import argparse
import asyncio
import sys

from sqlalchemy import select

from studydeck.clients.database_client import AsyncSessionLocal, async_engine
from studydeck.config.logger import configure_logger
from studydeck.domain.enums import Role
from studydeck.domain.models import User
from studydeck.security.security import create_access_token
from studydeck.utils.migration_manager import run_migrations

logger = configure_logger()


async def ensure_user(email: str, name: str, role: Role) -> User:
    """Найти пользователя по email или создать нового."""
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if user:
            print(f"✅ Пользователь {email} уже существует (id={user.id})")
            return user

        user = User(email=email, name=name, role=role, is_active=True)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        print(f"👤 Создан пользователь {email} (id={user.id})")
        return user


async def init_database(email: str, name: str, role: Role) -> None:
    """Инициализация базы данных и выдача токена разработчика."""
    try:
        print("🔄 Применение миграций...")
        await asyncio.to_thread(run_migrations)
        print("✅ Миграции применены успешно")

        user = await ensure_user(email, name, role)
        token = create_access_token({"sub": str(user.id), "role": role.value})
        print(f"🔑 Bearer токен:\n{token}")
    except Exception as e:
        logger.error(f"Ошибка при инициализации базы данных: {e}")
        print(f"❌ Ошибка: {e}")
        sys.exit(1)
    finally:
        await async_engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Инициализация базы StudyDeck")
    parser.add_argument("--email", default="dev@studydeck.local")
    parser.add_argument("--name", default="Developer")
    parser.add_argument(
        "--role", choices=[role.value for role in Role], default=Role.USER.value
    )
    args = parser.parse_args()
    asyncio.run(init_database(args.email, args.name, Role(args.role)))


if __name__ == "__main__":
    main()
