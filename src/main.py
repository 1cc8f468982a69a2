# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения Tango Test.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.v1.categories import router as categories_router
from src.api.v1.shared.responses import error_payload
from src.api.v1.tests import router as tests_router
from src.api.v1.words import router as words_router
from src.clients.database_client import (AsyncSessionLocal, async_engine,
                                         ensure_default_category, init_db)
from src.config.logger import configure_logger, get_system_logger
from src.config.settings import settings
from src.config.uvicorn_config import setup_uvicorn_logging
from src.service.cache_service import cache_service
from src.utils.exceptions import APIException
from src.utils.migration_manager import check_and_apply_migrations
from src.utils.startup_banner import print_startup_banner

logger = configure_logger()

app = FastAPI(
    title=settings.app_name,
    description="API банка слов и сборки словарных тестов (английский ↔ японский)",
    version=settings.app_version,
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
    openapi_tags=[
        {"name": "📚 Слова - 📖 Чтение", "description": "Поиск и получение слов"},
        {"name": "📚 Слова - ➕ Создание", "description": "Создание новых слов"},
        {"name": "📚 Слова - ✏️ Обновление", "description": "Обновление слов"},
        {"name": "📚 Слова - 🗑️ Удаление", "description": "Удаление слов"},
        {
            "name": "📚 Слова - 📦 Массовые операции",
            "description": "Массовое удаление слов",
        },
        {"name": "📚 Слова - 📥 Импорт", "description": "Импорт слов из JSON и CSV"},
        {"name": "📚 Слова - 📊 Экспорт", "description": "Экспорт слов в CSV"},
        {"name": "📚 Слова - 🔢 Диапазон", "description": "Выборка слов по диапазону ID"},
        {"name": "🏷️ Категории - 📖 Чтение", "description": "Получение категорий"},
        {"name": "🏷️ Категории - ➕ Создание", "description": "Создание категорий"},
        {"name": "🏷️ Категории - ✏️ Обновление", "description": "Обновление категорий"},
        {
            "name": "🏷️ Категории - 🗑️ Удаление",
            "description": "Удаление категорий с переносом слов в категорию по умолчанию",
        },
        {
            "name": "🏷️ Категории - 📊 Статистика",
            "description": "Количество категорий, слов и тестов",
        },
        {"name": "📝 Тесты - 📖 Чтение", "description": "Получение тестов"},
        {"name": "📝 Тесты - ➕ Создание", "description": "Сборка и сохранение тестов"},
        {"name": "📝 Тесты - 👁️ Предпросмотр", "description": "Сборка без сохранения"},
        {"name": "📝 Тесты - 🗑️ Удаление", "description": "Удаление тестов"},
        {"name": "📝 Тесты - 🕓 История", "description": "Журнал использования тестов"},
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


# ---------------------------------------------------------------------------
# Обработчики ошибок: любой сбой превращается в конверт {success: false, ...}
# ---------------------------------------------------------------------------


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(exc.detail),
        headers=exc.headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP {exc.status_code} {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = "Некорректные данные запроса"
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")
        )
        detail = f"{location}: {first.get('msg')}" if location else first.get("msg", detail)
    logger.warning(f"Ошибка валидации {request.method} {request.url.path}: {detail}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload(detail),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"💥 Критическая ошибка API: {request.method} {request.url.path}")
    logger.opt(exception=exc).error(f"Детали ошибки: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload("Внутренняя ошибка сервера"),
    )


# Подключаем роутеры
app.include_router(words_router, prefix="/api/v1")
app.include_router(categories_router, prefix="/api/v1")
app.include_router(tests_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    # Настраиваем логи uvicorn через loguru
    setup_uvicorn_logging()

    print_startup_banner()
    system_logger = get_system_logger()

    db_status = "❌"
    redis_status = "❌"
    migrations_status = "❌"

    system_logger.info("🔧 Инициализация сервисов...")

    # Проверяем подключение к базе данных
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        db_status = "✅"
        system_logger.info("✅ База данных подключена")
    except Exception as e:
        logger.error(f"❌ Ошибка базы данных: {e}")
        raise

    # Redis не критичен: без него кэш просто отключается
    if not cache_service.enabled:
        redis_status = "⏸️"
        system_logger.info("⏸️ Redis отключен настройками")
    elif await cache_service.ping():
        redis_status = "✅"
        system_logger.info("✅ Redis подключен и готов")
    else:
        cache_service.enabled = False
        redis_status = "⚠️"
        logger.warning("⚠️ Продолжаем работу без Redis кэширования")

    # Миграции, либо создание таблиц по моделям
    if await check_and_apply_migrations():
        migrations_status = "✅"
    else:
        await init_db()
        migrations_status = "⏸️"

    async with AsyncSessionLocal() as session:
        await ensure_default_category(session)

    print("     📊 Статус сервисов:")
    print(
        f"        База данных: {db_status:<5} Redis: {redis_status:<5} Миграции: {migrations_status:<5}"
    )
    print("    ")
    print("     🎉 Все сервисы готовы к работе!")


@app.on_event("shutdown")
async def shutdown_event():
    """Обработчик завершения приложения"""
    logger.info(f"🛑 Завершение работы {settings.app_name}")
    await cache_service.close()
    await async_engine.dispose()


@app.get("/api/v1")
async def api_root():
    """Корневой эндпоинт API."""
    return {
        "success": True,
        "data": {"name": settings.app_name, "version": app.version},
    }


@app.get("/api/v1/health")
async def api_health():
    """Проверка живости приложения."""
    return {"success": True, "data": {"status": "ok"}}


if __name__ == "__main__":
    import uvicorn

    from src.config.uvicorn_config import get_uvicorn_config

    uvicorn.run(**get_uvicorn_config())
