# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования модулей, коллекций и прогресса
"""

from typing import Iterable, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.enums import Role, TermStatus
from studydeck.domain.models import Module, Term, User, UserModule
from studydeck.repository.base import create_item
from studydeck.repository.terms import create_terms
from studydeck.security.security import create_access_token
from studydeck.utils.slugify import slugify


async def create_test_user(
    session: AsyncSession, user_id: int = 1, role: Role = Role.USER
) -> User:
    """Создать тестового пользователя"""
    return await create_item(
        session,
        User,
        id=user_id,
        email=f"user{user_id}@example.com",
        name=f"Test User {user_id}",
        profile_picture=f"https://cdn.example.com/u{user_id}.png",
        role=role,
        is_active=True,
    )


async def create_test_module(
    session: AsyncSession,
    owner_id: int = 1,
    title: str = "Test Module",
    is_private: bool = False,
    description: Optional[str] = "Test module description",
) -> Module:
    """Создать тестовый модуль"""
    return await create_item(
        session,
        Module,
        title=title,
        slug=slugify(title),
        description=description,
        is_private=is_private,
        owner_id=owner_id,
    )


async def create_test_terms(
    session: AsyncSession,
    module_id: int,
    items: Iterable[Tuple[str, TermStatus, bool]] = (
        ("cell", TermStatus.NOT_STARTED, True),
        ("nucleus", TermStatus.IN_PROGRESS, False),
        ("ribosome", TermStatus.COMPLETED, True),
    ),
) -> List[Term]:
    """Создать термины модуля: (текст, статус владельца, отметка владельца)"""
    return await create_terms(
        session,
        module_id,
        [
            {
                "term": term,
                "definition": f"Definition of {term}",
                "status": status,
                "is_starred": is_starred,
            }
            for term, status, is_starred in items
        ],
    )


async def create_test_link(
    session: AsyncSession, user_id: int, module_id: int
) -> UserModule:
    """Добавить модуль в коллекцию пользователя напрямую"""
    return await create_item(session, UserModule, user_id=user_id, module_id=module_id)


def auth_headers(user_id: int, role: Role = Role.USER) -> dict:
    """Заголовок Authorization с access-токеном пользователя"""
    token = create_access_token({"sub": str(user_id), "role": role.value})
    return {"Authorization": f"Bearer {token}"}
