# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных (PostgreSQL в продакшене, SQLite локально).
"""
from typing import AsyncGenerator

from sqlalchemy import event, select, text
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from src.config.logger import configure_logger
from src.config.settings import settings
from src.domain.models import Base, Category

logger = configure_logger()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """
    Создает асинхронный движок с учетом диалекта.

    Для SQLite включает проверку внешних ключей, чтобы ON DELETE
    работал так же, как в PostgreSQL.
    """
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # Проверяем соединение перед использованием
        kwargs.setdefault("pool_recycle", 3600)  # Переподключаемся каждый час

    engine = create_async_engine(database_url, echo=settings.database_echo, **kwargs)

    if database_url.startswith("sqlite"):

        @event.listens_for(engine.sync_engine, "connect")
        def _configure_sqlite_connection(dbapi_connection, connection_record):
            # Транзакции открываем сами, иначе SAVEPOINT ведет себя некорректно
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
            # Встроенный lower() в SQLite понимает только ASCII
            dbapi_connection.create_function("lower", 1, _unicode_lower)

        @event.listens_for(engine.sync_engine, "begin")
        def _begin_sqlite_transaction(conn):
            conn.exec_driver_sql("BEGIN")

    return engine


# Создаем асинхронный движок для асинхронных операций
async_engine = build_engine(
    settings.database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
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


async def init_db(engine: AsyncEngine = async_engine) -> None:
    """
    Создает все таблицы, определенные в моделях (если их еще нет).

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ensure_default_category(session: AsyncSession) -> Category:
    """
    Гарантирует наличие категории по умолчанию (id=1).

    Args:
        session: Сессия базы данных

    Returns:
        Категория по умолчанию
    """
    result = await session.execute(
        select(Category).where(Category.id == settings.default_category_id)
    )
    category = result.scalars().first()
    if category is not None:
        return category

    category = Category(
        id=settings.default_category_id,
        name=settings.default_category_name,
        description=settings.default_category_description,
    )
    session.add(category)
    await session.flush()
    if session.get_bind().dialect.name == "postgresql":
        # Явный id не сдвигает последовательность
        await session.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('categories', 'id'), "
                "(SELECT MAX(id) FROM categories))"
            )
        )
    await session.commit()
    await session.refresh(category)
    logger.info(
        f"Создана категория по умолчанию '{category.name}' (ID {category.id})"
    )
    return category
