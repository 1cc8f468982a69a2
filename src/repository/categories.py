# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/repository/categories.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Запросы к категориям слов.
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy import Row, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models import Category, Test, Word
from src.repository.base import count_items, get_item


def _category_with_word_count():
    return (
        select(Category, func.count(Word.id).label("word_count"))
        .outerjoin(Word, Word.category_id == Category.id)
        .group_by(Category.id)
    )


async def list_categories_repo(session: AsyncSession) -> List[Row]:
    """Все категории по возрастанию ID со счетчиком слов."""
    result = await session.execute(_category_with_word_count().order_by(Category.id))
    return list(result.all())


async def get_category_with_count_repo(session: AsyncSession, category_id: int) -> Row:
    """
    Получить категорию со счетчиком слов.

    Raises:
        NotFoundError: Если категория не найдена
    """
    result = await session.execute(
        _category_with_word_count().where(Category.id == category_id)
    )
    row = result.first()
    if row is None:
        # get_item поднимет NotFoundError с единым текстом
        await get_item(session, Category, category_id)
    return row


async def get_category_by_name_repo(
    session: AsyncSession, name: str, exclude_id: Optional[int] = None
) -> Optional[Category]:
    """Найти категорию по точному имени, опционально исключая одну запись."""
    stmt = select(Category).where(Category.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Category.id != exclude_id)
    result = await session.execute(stmt)
    return result.scalars().first()


async def delete_category_repo(
    session: AsyncSession, category_id: int, fallback_category_id: int
) -> int:
    """
    Удалить категорию, перенеся ее слова в резервную категорию.

    Перенос слов, отвязка тестов и удаление выполняются одной транзакцией.

    Args:
        session: Сессия базы данных
        category_id: ID удаляемой категории
        fallback_category_id: ID категории, которая получит слова

    Returns:
        Количество перенесенных слов
    """
    try:
        moved = await session.execute(
            update(Word)
            .where(Word.category_id == category_id)
            .values(category_id=fallback_category_id)
        )
        await session.execute(
            update(Test)
            .where(Test.category_id == category_id)
            .values(category_id=None)
        )
        await session.execute(delete(Category).where(Category.id == category_id))
        await session.commit()
    except Exception as e:
        logger.error(f"Ошибка удаления категории {category_id}: {str(e)}")
        await session.rollback()
        raise

    logger.info(
        f"Категория {category_id} удалена, слов перенесено в категорию "
        f"{fallback_category_id}: {moved.rowcount}"
    )
    return moved.rowcount


async def get_overview_counts_repo(session: AsyncSession) -> dict:
    """Количество категорий, слов и тестов."""
    return {
        "categories": await count_items(session, Category),
        "words": await count_items(session, Word),
        "tests": await count_items(session, Test),
    }
