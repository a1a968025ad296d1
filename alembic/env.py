from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import make_url

from alembic import context

# Логи Alembic уходят в loguru через InterceptHandler
import studydeck.config.logger  # noqa: E402,F401
from studydeck.config.settings import settings  # noqa: E402
from studydeck.domain.models import Base  # noqa: E402

# это объект конфигурации Alembic, который предоставляет
# доступ к значениям в используемом .ini файле.
config = context.config

# добавляем объект MetaData модели для поддержки 'autogenerate'
target_metadata = Base.metadata

# Асинхронные драйверы приложения -> синхронные драйверы для Alembic
_SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}


def get_url() -> str:
    """URL базы данных из настроек с синхронным драйвером."""
    url = make_url(settings.database_url)
    driver = _SYNC_DRIVERS.get(url.drivername)
    if driver:
        url = url.set(drivername=driver)
    return url.render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    """Запуск миграций в 'offline' режиме.

    Контекст настраивается только по URL, без Engine;
    вызовы context.execute() выводят SQL в вывод скрипта.
    """
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Запуск миграций в 'online' режиме."""
    connectable = engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            # ALTER для SQLite через пересоздание таблиц
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
