# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/service/words.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисный слой для операций с банком слов.
"""

from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models import Category, Word
from src.repository.base import create_item, item_exists, update_item
from src.repository.words import (delete_words_repo, get_referenced_word_ids_repo,
                                  get_word_repo, get_words_in_range_repo,
                                  list_words_repo)
from src.service.cache_service import cache_service
from src.utils.csv_tools import words_to_csv
from src.utils.exceptions import ConflictError, NotFoundError, ValidationError


def serialize_word(word: Word, category_name: Optional[str] = None) -> Dict[str, Any]:
    """Представление слова для ответа API."""
    return {
        "id": word.id,
        "english": word.english,
        "japanese": word.japanese,
        "category_id": word.category_id,
        "category_name": category_name,
        "difficulty": word.difficulty,
        "frequency": word.frequency,
        "created_at": word.created_at,
        "updated_at": word.updated_at,
    }


async def _ensure_category_exists(session: AsyncSession, category_id: int) -> None:
    if not await item_exists(session, Category, category_id):
        raise ValidationError(f"Категория с ID {category_id} не существует")


async def list_words_service(
    session: AsyncSession,
    search: Optional[str] = None,
    category_id: Optional[int] = None,
    difficulty: Optional[int] = None,
    limit: int = 50,
    offset: int = 0,
) -> Dict[str, Any]:
    """
    Получить страницу слов с фильтрами.

    Returns:
        ``{"words": [...], "total": ..., "limit": ..., "offset": ...}``
    """
    rows, total = await list_words_repo(
        session,
        search=search,
        category_id=category_id,
        difficulty=difficulty,
        limit=limit,
        offset=offset,
    )
    return {
        "words": [serialize_word(word, category_name) for word, category_name in rows],
        "total": total,
        "limit": limit,
        "offset": offset,
    }


async def get_word_service(session: AsyncSession, word_id: int) -> Dict[str, Any]:
    word, category_name = await get_word_repo(session, word_id)
    return serialize_word(word, category_name)


async def get_words_by_range_service(
    session: AsyncSession, start_id: int, end_id: int
) -> List[Dict[str, Any]]:
    """
    Слова в диапазоне ID (включительно) по возрастанию.

    Raises:
        ValidationError: Если начало диапазона больше конца
    """
    if start_id > end_id:
        raise ValidationError("Начальный ID должен быть меньше или равен конечному")
    rows = await get_words_in_range_repo(session, start_id, end_id)
    return [serialize_word(word, category_name) for word, category_name in rows]


async def create_word_service(
    session: AsyncSession,
    english: str,
    japanese: str,
    category_id: int,
    difficulty: int = 1,
) -> Dict[str, Any]:
    """
    Создать слово.

    Raises:
        ValidationError: Если категория не существует
    """
    await _ensure_category_exists(session, category_id)
    word = await create_item(
        session,
        Word,
        english=english,
        japanese=japanese,
        category_id=category_id,
        difficulty=difficulty,
    )
    logger.info(f"Создано слово {word.id}: {english} / {japanese}")
    await cache_service.invalidate_vocabulary_cache()
    return await get_word_service(session, word.id)


async def update_word_service(
    session: AsyncSession, word_id: int, **fields: Any
) -> Dict[str, Any]:
    """
    Частично обновить слово. Поля со значением None не изменяются.

    Raises:
        NotFoundError: Если слово не найдено
        ValidationError: Если новая категория не существует
    """
    changes = {key: value for key, value in fields.items() if value is not None}
    if "category_id" in changes:
        await _ensure_category_exists(session, changes["category_id"])

    await update_item(session, Word, word_id, **changes)
    logger.info(f"Слово {word_id} обновлено: {sorted(changes)}")
    await cache_service.invalidate_vocabulary_cache()
    return await get_word_service(session, word_id)


async def _ensure_not_referenced(session: AsyncSession, word_ids: List[int]) -> None:
    referenced = await get_referenced_word_ids_repo(session, word_ids)
    if referenced:
        ids = ", ".join(str(word_id) for word_id in referenced)
        raise ConflictError(
            f"Слова используются в сохраненных тестах и не могут быть удалены: {ids}"
        )


async def delete_word_service(session: AsyncSession, word_id: int) -> None:
    """
    Удалить слово.

    Raises:
        NotFoundError: Если слово не найдено
        ConflictError: Если слово используется в тестах
    """
    await _ensure_not_referenced(session, [word_id])
    deleted = await delete_words_repo(session, [word_id])
    if deleted == 0:
        raise NotFoundError(resource_type="Слово", resource_id=word_id)
    await cache_service.invalidate_vocabulary_cache()


async def bulk_delete_words_service(session: AsyncSession, word_ids: List[int]) -> int:
    """
    Удалить несколько слов.

    Если хотя бы одно слово используется в тестах, не удаляется ничего.

    Returns:
        Количество фактически удаленных слов
    """
    if not word_ids:
        raise ValidationError("Необходим непустой список ID")
    await _ensure_not_referenced(session, word_ids)
    deleted = await delete_words_repo(session, word_ids)
    if deleted:
        await cache_service.invalidate_vocabulary_cache()
    return deleted


async def export_words_service(
    session: AsyncSession,
    search: Optional[str] = None,
    category_id: Optional[int] = None,
    difficulty: Optional[int] = None,
) -> str:
    """Выгрузить отфильтрованные слова в CSV в формате импорта."""
    rows, total = await list_words_repo(
        session,
        search=search,
        category_id=category_id,
        difficulty=difficulty,
        limit=None,
    )
    logger.info(f"Экспорт слов в CSV: {total}")
    return words_to_csv(rows)
