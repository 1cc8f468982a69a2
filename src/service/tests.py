# -*- coding: utf-8 -*-
"""
Сервис для работы с сохраненными тестами.

Этот модуль содержит чтение, удаление тестов и журнал их использования.
Сборка новых тестов находится в ``src.service.test_assembly``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.logger import configure_logger
from src.domain.models import Test, TestHistory
from src.repository.base import get_item
from src.repository.tests import (add_history_repo, delete_test_repo,
                                  get_test_items_repo, get_test_repo,
                                  list_history_repo, list_tests_repo)
from src.service.cache_service import cache_service, get_or_set_test

logger = configure_logger(__name__)


def serialize_test(test: Test, category_name: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": test.id,
        "title": test.title,
        "description": test.description,
        "test_type": test.test_type,
        "question_count": test.question_count,
        "category_id": test.category_id,
        "category_name": category_name,
        "created_at": test.created_at,
    }


def serialize_history(entry: TestHistory) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "test_id": entry.test_id,
        "used_at": entry.used_at,
        "notes": entry.notes,
    }


async def list_tests_service(
    session: AsyncSession, limit: int = 20, offset: int = 0
) -> Dict[str, Any]:
    """Страница тестов, новые первыми."""
    rows, total = await list_tests_repo(session, limit=limit, offset=offset)
    return {
        "tests": [serialize_test(test, category_name) for test, category_name in rows],
        "total": total,
        "limit": limit,
        "offset": offset,
    }


async def _load_test_detail(session: AsyncSession, test_id: int) -> Dict[str, Any]:
    test, category_name = await get_test_repo(session, test_id)
    rows = await get_test_items_repo(session, test_id)
    return {
        "test": serialize_test(test, category_name),
        "items": [
            {
                "id": item.id,
                "test_id": item.test_id,
                "word_id": item.word_id,
                "question_order": item.question_order,
                "question_type": item.question_type,
                "english": english,
                "japanese": japanese,
                "created_at": item.created_at,
            }
            for item, english, japanese in rows
        ],
    }


async def get_test_detail_service(session: AsyncSession, test_id: int) -> Dict[str, Any]:
    """
    Тест с вопросами по порядку.

    Карточка кэшируется: тест неизменяем, а правки слов сбрасывают кэш.

    Raises:
        NotFoundError: Если тест не найден
    """
    return await get_or_set_test(test_id, _load_test_detail, session, test_id)


async def delete_test_service(session: AsyncSession, test_id: int) -> None:
    """
    Удалить тест вместе с вопросами и журналом использования.

    Raises:
        NotFoundError: Если тест не найден
    """
    await delete_test_repo(session, test_id)
    await cache_service.invalidate_test_cache(test_id)


async def record_test_usage_service(
    session: AsyncSession, test_id: int, notes: Optional[str] = None
) -> Dict[str, Any]:
    """
    Записать использование теста.

    Raises:
        NotFoundError: Если тест не найден
    """
    await get_item(session, Test, test_id)
    entry = await add_history_repo(session, test_id, notes)
    logger.info(f"Записано использование теста {test_id}")
    return serialize_history(entry)


async def list_test_history_service(
    session: AsyncSession, test_id: int
) -> List[Dict[str, Any]]:
    """Журнал использования теста, последние записи первыми."""
    await get_item(session, Test, test_id)
    return [serialize_history(entry) for entry in await list_history_repo(session, test_id)]
