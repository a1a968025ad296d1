# -*- coding: utf-8 -*-
"""security.security
~~~~~~~~~~~~~~~~~~~~
JWT помощники и проверка ролей.

Ключевые моменты
================
* Использует *python‑jose* для компактной обработки JWS.
* Токены выпускает внешний сервис авторизации; здесь они только проверяются.
  **create_access_token** оставлен для скриптов и тестов.
* Экспортирует **verify_token**, **require_roles** (фабрика зависимостей
  FastAPI) и **get_current_user_id**.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.clients.database_client import get_db
from studydeck.config.logger import configure_logger
from studydeck.config.settings import settings
from studydeck.domain.enums import Role
from studydeck.repository.users import get_user_by_id
from studydeck.utils.exceptions import NotFoundError

logger = configure_logger(__name__)

# ---------------------------------------------------------------------------
# JWT помощники
# ---------------------------------------------------------------------------

ACCESS_TOKEN_SECRET = settings.jwt_secret


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta
        if expires_delta is not None
        else timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire, "token_type": "access"})
    if "sub" in to_encode and not isinstance(to_encode["sub"], str):
        to_encode["sub"] = str(to_encode["sub"])
    return jwt.encode(to_encode, ACCESS_TOKEN_SECRET, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            token, ACCESS_TOKEN_SECRET, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as exc:
        logger.error(f"Ошибка проверки JWT: {str(exc)}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    token_type = payload.get("token_type")
    if token_type != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token type. Expected access, got {token_type}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload


# ---------------------------------------------------------------------------
# Проверка на основе ролей
# ---------------------------------------------------------------------------


def _extract_token(request: Request) -> str:
    auth: str | None = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth.split(" ", 1)[1]


def require_roles(*allowed_roles: Role) -> Callable[[Request], dict]:
    allowed: set[Role] = set(allowed_roles)

    async def checker(request: Request) -> dict:
        token = _extract_token(request)
        payload = verify_token(token)
        try:
            role = Role(payload["role"])
            int(payload["sub"])
        except (KeyError, ValueError, TypeError) as exc:
            logger.error(f"Неверный payload токена: {payload}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token payload",
            ) from exc

        if role not in allowed:
            logger.warning(
                f"Доступ запрещен: Пользователь {payload.get('sub')} с ролью {role} пытался получить доступ к {request.url.path}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden"
            )

        return payload

    return checker


# Удобные предустановки --------------------------------------------------------

authenticated = require_roles(Role.USER, Role.ADMIN)


async def get_current_user_id(
    claims: dict = Depends(authenticated),
    session: AsyncSession = Depends(get_db),
) -> int:
    """
    ID текущего пользователя из проверенного токена.

    Пользователь из токена должен существовать в базе.

    Raises:
        NotFoundError: Пользователь из токена не найден
    """
    user_id = int(claims["sub"])
    if await get_user_by_id(session, user_id) is None:
        logger.warning(f"Токен ссылается на несуществующего пользователя {user_id}")
        raise NotFoundError(resource_type="User", resource_id=user_id)
    return user_id
