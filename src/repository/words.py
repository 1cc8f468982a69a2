# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/repository/words.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Запросы к банку слов: фильтрация, выборки для тестов, массовое удаление.

Все выборки возвращают строки вида ``(Word, category_name)``.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from loguru import logger
from sqlalchemy import Row, Select, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models import Category, TestItem, Word
from src.utils.exceptions import NotFoundError

# Строка результата: (Word, category_name)
WordRow = Row


def _word_with_category() -> Select:
    return select(Word, Category.name.label("category_name")).outerjoin(
        Category, Word.category_id == Category.id
    )


def _apply_filters(
    stmt: Select,
    search: Optional[str] = None,
    category_id: Optional[int] = None,
    difficulty: Optional[int] = None,
) -> Select:
    if search:
        pattern = f"%{search.strip()}%"
        stmt = stmt.where(
            or_(Word.english.ilike(pattern), Word.japanese.ilike(pattern))
        )
    if category_id is not None:
        stmt = stmt.where(Word.category_id == category_id)
    if difficulty is not None:
        stmt = stmt.where(Word.difficulty == difficulty)
    return stmt


async def list_words_repo(
    session: AsyncSession,
    search: Optional[str] = None,
    category_id: Optional[int] = None,
    difficulty: Optional[int] = None,
    limit: Optional[int] = 50,
    offset: int = 0,
) -> Tuple[List[WordRow], int]:
    """
    Получить страницу слов с фильтрами и общее количество совпадений.

    Args:
        session: Сессия базы данных
        search: Подстрока для поиска в английском или японском варианте
        category_id: Фильтр по категории
        difficulty: Фильтр по сложности
        limit: Размер страницы (None - без ограничения)
        offset: Смещение

    Returns:
        Кортеж (строки, общее количество)
    """
    stmt = _apply_filters(_word_with_category(), search, category_id, difficulty)
    stmt = stmt.order_by(Word.id.desc()).offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)

    count_stmt = _apply_filters(
        select(func.count(Word.id)), search, category_id, difficulty
    )

    rows = (await session.execute(stmt)).all()
    total = (await session.execute(count_stmt)).scalar_one()
    logger.debug(f"Найдено слов: {total}, на странице: {len(rows)}")
    return list(rows), total


async def get_word_repo(session: AsyncSession, word_id: int) -> WordRow:
    """
    Получить слово вместе с названием категории.

    Raises:
        NotFoundError: Если слово не найдено
    """
    result = await session.execute(_word_with_category().where(Word.id == word_id))
    row = result.first()
    if row is None:
        raise NotFoundError(resource_type="Слово", resource_id=word_id)
    return row


async def get_words_in_range_repo(
    session: AsyncSession,
    start_id: int,
    end_id: int,
    category_id: Optional[int] = None,
) -> List[WordRow]:
    """Слова с ``start_id <= id <= end_id`` по возрастанию ID."""
    stmt = _word_with_category().where(Word.id.between(start_id, end_id))
    if category_id is not None:
        stmt = stmt.where(Word.category_id == category_id)
    result = await session.execute(stmt.order_by(Word.id))
    return list(result.all())


async def get_words_by_ids_repo(
    session: AsyncSession, word_ids: Iterable[int]
) -> List[WordRow]:
    """Слова из явного списка ID. Несуществующие ID молча пропускаются."""
    unique_ids = set(word_ids)
    if not unique_ids:
        return []
    result = await session.execute(
        _word_with_category().where(Word.id.in_(sorted(unique_ids)))
    )
    return list(result.all())


async def get_random_words_repo(
    session: AsyncSession, count: int, category_id: Optional[int] = None
) -> List[WordRow]:
    """Равномерная случайная выборка не более ``count`` слов."""
    stmt = _word_with_category()
    if category_id is not None:
        stmt = stmt.where(Word.category_id == category_id)
    result = await session.execute(stmt.order_by(func.random()).limit(count))
    return list(result.all())


async def find_duplicate_word_repo(
    session: AsyncSession, english: str, japanese: str
) -> Optional[Word]:
    """
    Найти слово, совпадающее по английскому ИЛИ японскому варианту.

    Сравнение без учета регистра и крайних пробелов.
    """
    result = await session.execute(
        select(Word)
        .where(
            or_(
                func.lower(func.trim(Word.english)) == english.strip().lower(),
                func.lower(func.trim(Word.japanese)) == japanese.strip().lower(),
            )
        )
        .limit(1)
    )
    return result.scalars().first()


async def get_referenced_word_ids_repo(
    session: AsyncSession, word_ids: Iterable[int]
) -> List[int]:
    """ID слов из списка, которые используются в сохраненных тестах."""
    unique_ids = set(word_ids)
    if not unique_ids:
        return []
    result = await session.execute(
        select(TestItem.word_id)
        .where(TestItem.word_id.in_(sorted(unique_ids)))
        .distinct()
        .order_by(TestItem.word_id)
    )
    return list(result.scalars().all())


async def delete_words_repo(session: AsyncSession, word_ids: Sequence[int]) -> int:
    """
    Удалить слова по списку ID одним запросом.

    Returns:
        Количество фактически удаленных строк
    """
    try:
        result = await session.execute(
            delete(Word)
            .where(Word.id.in_(sorted(set(word_ids))))
        )
        await session.commit()
    except Exception as e:
        logger.error(f"Ошибка удаления слов {list(word_ids)}: {str(e)}")
        await session.rollback()
        raise
    logger.info(f"Удалено слов: {result.rowcount}")
    return result.rowcount


async def increment_frequency_repo(
    session: AsyncSession, word_ids: Iterable[int]
) -> None:
    """
    Увеличить счетчик использования слов на 1.

    Не фиксирует транзакцию: вызывается внутри сохранения теста.
    """
    unique_ids = set(word_ids)
    if not unique_ids:
        return
    await session.execute(
        update(Word)
        .where(Word.id.in_(sorted(unique_ids)))
        # Счетчик использования не считается правкой слова
        .values(frequency=Word.frequency + 1, updated_at=Word.updated_at)
    )
