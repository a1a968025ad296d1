# -*- coding: utf-8 -*-
"""
studydeck/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~
SQLAlchemy модели каталога модулей, коллекций и прогресса пользователей.

Связи между таблицами выражены только внешними ключами: все выборки делаются
явными запросами в репозиториях, без ленивой загрузки графа объектов.
"""

from datetime import datetime

from sqlalchemy import (Boolean, DateTime, Enum, ForeignKey, Integer, String,
                        Text, UniqueConstraint, func)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from studydeck.domain.enums import Role, TermStatus


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Base(DeclarativeBase):
    """Базовый класс всех моделей."""


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )


class User(TimestampMixin, Base):
    """Пользователь. Учетные данные хранит внешний сервис авторизации."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_picture: Mapped[str | None] = mapped_column(String(1024))
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="role", values_callable=_enum_values),
        default=Role.USER,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class Module(TimestampMixin, Base):
    """Набор карточек (модуль), принадлежащий одному владельцу."""

    __tablename__ = "modules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    is_private: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )


class Term(TimestampMixin, Base):
    """
    Карточка модуля.

    Поля status/is_starred хранят собственный прогресс владельца и служат
    начальными значениями при первом обращении владельца к прогрессу.
    """

    __tablename__ = "terms"
    __table_args__ = (
        UniqueConstraint("module_id", "term", name="uq_terms_module_term"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    module_id: Mapped[int] = mapped_column(
        ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    term: Mapped[str] = mapped_column(String(512), nullable=False)
    definition: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[TermStatus] = mapped_column(
        Enum(TermStatus, name="term_status", values_callable=_enum_values),
        default=TermStatus.NOT_STARTED,
        nullable=False,
    )
    is_starred: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class UserModule(TimestampMixin, Base):
    """Модуль, добавленный пользователем в свою коллекцию."""

    __tablename__ = "user_modules"
    __table_args__ = (
        UniqueConstraint("user_id", "module_id", name="uq_user_modules_user_module"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    module_id: Mapped[int] = mapped_column(
        ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True
    )


class UserTermProgress(TimestampMixin, Base):
    """Прогресс пользователя по одному термину."""

    __tablename__ = "user_term_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "term_id", name="uq_user_term_progress_user_term"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    term_id: Mapped[int] = mapped_column(
        ForeignKey("terms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[TermStatus] = mapped_column(
        Enum(TermStatus, name="term_status", values_callable=_enum_values),
        default=TermStatus.NOT_STARTED,
        nullable=False,
    )
    is_starred: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
