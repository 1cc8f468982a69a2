# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/service/categories.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисный слой для категорий слов.
"""

from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import settings
from src.domain.models import Category
from src.repository.base import create_item, get_item, update_item
from src.repository.categories import (delete_category_repo,
                                       get_category_by_name_repo,
                                       get_category_with_count_repo,
                                       get_overview_counts_repo,
                                       list_categories_repo)
from src.service.cache_service import cache_service, get_or_set_stats
from src.utils.exceptions import ConflictError, ValidationError


def serialize_category(category: Category, word_count: int = 0) -> Dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "description": category.description,
        "created_at": category.created_at,
        "word_count": word_count,
    }


async def _ensure_unique_name(
    session: AsyncSession, name: str, exclude_id: Optional[int] = None
) -> None:
    if await get_category_by_name_repo(session, name, exclude_id=exclude_id):
        raise ConflictError(f"Категория с названием '{name}' уже существует")


async def list_categories_service(session: AsyncSession) -> List[Dict[str, Any]]:
    """Все категории со счетчиками слов."""
    rows = await list_categories_repo(session)
    return [serialize_category(category, word_count) for category, word_count in rows]


async def get_category_service(session: AsyncSession, category_id: int) -> Dict[str, Any]:
    category, word_count = await get_category_with_count_repo(session, category_id)
    return serialize_category(category, word_count)


async def create_category_service(
    session: AsyncSession, name: str, description: Optional[str] = None
) -> Dict[str, Any]:
    """
    Создать категорию.

    Raises:
        ConflictError: Если категория с таким названием уже существует
    """
    await _ensure_unique_name(session, name)
    category = await create_item(session, Category, name=name, description=description)
    logger.info(f"Создана категория {category.id}: {name}")
    await cache_service.delete(cache_service.build_key("stats", "overview"))
    return serialize_category(category)


async def update_category_service(
    session: AsyncSession,
    category_id: int,
    name: str,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Переименовать категорию и обновить описание.

    Raises:
        NotFoundError: Если категория не найдена
        ConflictError: Если название занято другой категорией
    """
    await get_item(session, Category, category_id)
    await _ensure_unique_name(session, name, exclude_id=category_id)
    await update_item(
        session, Category, category_id, name=name, description=description
    )
    logger.info(f"Категория {category_id} обновлена")
    await cache_service.invalidate_vocabulary_cache()
    return await get_category_service(session, category_id)


async def delete_category_service(session: AsyncSession, category_id: int) -> int:
    """
    Удалить категорию, перенеся ее слова в категорию по умолчанию.

    Returns:
        Количество перенесенных слов

    Raises:
        ValidationError: При попытке удалить категорию по умолчанию
        NotFoundError: Если категория не найдена
    """
    if category_id == settings.default_category_id:
        raise ValidationError("Нельзя удалить категорию по умолчанию")

    await get_item(session, Category, category_id)
    moved = await delete_category_repo(
        session, category_id, fallback_category_id=settings.default_category_id
    )
    await cache_service.invalidate_vocabulary_cache()
    return moved


async def get_stats_overview_service(session: AsyncSession) -> Dict[str, int]:
    """Количество категорий, слов и тестов (кэшируется)."""
    return await get_or_set_stats(get_overview_counts_repo, session)
