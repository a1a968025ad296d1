# -*- coding: utf-8 -*-
"""
Модуль для отображения баннера при запуске приложения.
"""

import platform
import sys
from datetime import datetime

from sqlalchemy.engine import make_url

from studydeck.config.settings import settings


def get_app_banner() -> str:
    """Возвращает заголовок баннера."""
    return "\n    🃏 StudyDeck API: модули, коллекции и прогресс изучения 🚀\n"


def get_startup_info() -> str:
    """Возвращает информацию о запуске приложения."""
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    python = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    if settings.app_domain:
        api_external = f"http://{settings.app_domain}/api"
    else:
        api_external = f"http://localhost:{settings.app_port}/api"

    # Пароль в логи не попадает
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    return (
        f"\n"
        f"      📅 Запуск: {now}\n"
        f"      🖥️  Система: {platform.system()} {platform.release()} ({platform.machine()})\n"
        f"      🐍 Python: {python}\n"
        f"      🌐 API: {api_external}\n"
        f"      📊 База данных: {database}\n"
        f"      ⚙️  Конфиг: {settings.get_config_source()}\n"
    )


def print_startup_banner() -> None:
    """Выводит полный баннер при запуске."""
    try:
        print(get_app_banner())
        print(get_startup_info())
        print("    " + "=" * 80)
    except UnicodeEncodeError:
        # Fallback для Windows консоли с проблемами кодировки
        print("=" * 80)
        print("StudyDeck API")
        print("=" * 80)
        print(get_startup_info())
        print("    " + "=" * 80)
