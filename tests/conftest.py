# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import os

# Окружение задается до импорта приложения: настройки читаются при импорте
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["REDIS_ENABLED"] = "false"
os.environ["LOG_FILE"] = ""

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.clients.database_client import (build_engine,  # noqa: E402
                                         ensure_default_category, get_db)
from src.domain.models import Base  # noqa: E402
from src.main import app  # noqa: E402

# Тестовая база данных в памяти
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Создать тестовый движок БД (новая база на каждый тест)."""
    engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)

    # Создаем таблицы
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Создать тестовую сессию БД с категорией по умолчанию."""
    async_session_maker = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        await ensure_default_category(session)
        yield session


@pytest.fixture
def override_get_db(test_session):
    """Override get_db dependency для тестирования API."""

    async def _override_get_db():
        yield test_session

    return _override_get_db


@pytest.fixture
async def async_client(override_get_db):
    """Создать асинхронный тестовый клиент для API."""
    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
