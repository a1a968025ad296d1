# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения StudyDeck.
"""

from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from studydeck.api.v1.modules.routes import router as modules_router
from studydeck.api.v1.shared.schemas import failure
from studydeck.api.v1.terms.routes import router as terms_router
from studydeck.clients.database_client import async_engine, init_db
from studydeck.config.logger import configure_logger, get_system_logger
from studydeck.config.settings import settings
from studydeck.config.uvicorn_config import setup_uvicorn_logging
from studydeck.utils.migration_manager import check_and_apply_migrations
from studydeck.utils.startup_banner import print_startup_banner

logger = configure_logger()
system_logger = get_system_logger()


app = FastAPI(
    title="StudyDeck API",
    description="API модулей карточек, коллекций и прогресса изучения",
    version="0.1.0",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
    openapi_tags=[
        {"name": "🗂️ Модули - ➕ Создание", "description": "Создание модулей"},
        {
            "name": "🗂️ Модули - 📖 Чтение",
            "description": "Свои модули, коллекция, поиск публичных и детали модуля",
        },
        {
            "name": "🗂️ Модули - ✏️ Обновление",
            "description": "Изменение, видимость и удаление своих модулей",
        },
        {
            "name": "🗂️ Модули - 📥 Коллекция",
            "description": "Добавление модулей в коллекцию и удаление из нее",
        },
        {"name": "🗂️ Модули - 🃏 Термины", "description": "Добавление терминов"},
        {
            "name": "🃏 Термины - 📊 Прогресс",
            "description": "Статус изучения и отметки терминов пользователя",
        },
        {
            "name": "🃏 Термины - ✏️ Управление",
            "description": "Изменение и удаление терминов владельцем",
        },
    ],
)

# Настройка CORS из настроек
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.get_cors_methods(),
    allow_headers=settings.get_cors_headers(),
)


# Middleware для логирования всех запросов
@app.middleware("http")
async def log_all_requests(request: Request, call_next):
    if request.url.path.startswith("/api/"):
        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    response = await call_next(request)

    if request.url.path.startswith("/api/"):
        if response.status_code >= 400:
            logger.warning(
                f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
            )
        else:
            logger.info(
                f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
            )

    return response


# -------------------------- обработчики ошибок ------------------------------


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP ошибки (в том числе APIException) в конверте ответа."""
    error = getattr(exc, "error_code", None)
    error = getattr(error, "value", error)
    if error is None:
        error = HTTPStatus(exc.status_code).phrase
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(str(exc.detail), str(error)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации запроса: 422 с перечнем полей."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=failure("Validation failed", "VALIDATION_ERROR", errors),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Непредвиденные ошибки: 500 без внутренних деталей."""
    logger.exception(
        f"💥 Критическая ошибка API: {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure("Internal server error", "INTERNAL_SERVER_ERROR"),
    )


# Настраиваем схему безопасности для OpenAPI
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    from fastapi.openapi.utils import get_openapi

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "Bearer": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "Введите ваш JWT токен в формате: Bearer <token>",
        }
    }
    openapi_schema["security"] = [{"Bearer": []}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi

# Подключаем роутеры
app.include_router(modules_router, prefix="/api/v1")
app.include_router(terms_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    # Настраиваем логи uvicorn
    setup_uvicorn_logging()

    print_startup_banner()

    logger.info("🔧 Инициализация сервисов...")

    # Проверяем подключение к базе данных
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("✅ База данных подключена")
    except Exception as e:
        logger.error(f"❌ Ошибка базы данных: {e}")
        raise

    await check_and_apply_migrations()

    # Таблицы, которых нет в миграциях (например, при AUTO_MIGRATE=false)
    await init_db()

    system_logger.info("🎉 Все сервисы готовы к работе!")


@app.on_event("shutdown")
async def shutdown_event():
    """Обработчик завершения приложения"""
    system_logger.info("🛑 Завершение работы StudyDeck API")
    await async_engine.dispose()


@app.get("/api/v1")
async def api_root():
    """Корневой эндпоинт API."""
    return {"message": "StudyDeck API работает", "version": app.version}


@app.get("/api/v1/health")
async def api_health():
    """Проверка живости приложения."""
    return {"status": "ok"}
