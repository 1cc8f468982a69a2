# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/repository/tests.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Хранение собранных тестов, их вопросов и журнала использования.
"""

from typing import List, Optional, Sequence, Tuple

from loguru import logger
from sqlalchemy import Row, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.enums import QuestionType, TestType
from src.domain.models import Category, Test, TestHistory, TestItem, Word
from src.repository.words import increment_frequency_repo
from src.utils.exceptions import NotFoundError


def _test_with_category():
    return select(Test, Category.name.label("category_name")).outerjoin(
        Category, Test.category_id == Category.id
    )


async def list_tests_repo(
    session: AsyncSession, limit: int = 20, offset: int = 0
) -> Tuple[List[Row], int]:
    """
    Страница тестов, новые первыми.

    Returns:
        Кортеж (строки ``(Test, category_name)``, общее количество)
    """
    result = await session.execute(
        _test_with_category()
        .order_by(Test.created_at.desc(), Test.id.desc())
        .limit(limit)
        .offset(offset)
    )
    total = (await session.execute(select(func.count(Test.id)))).scalar_one()
    return list(result.all()), total


async def get_test_repo(session: AsyncSession, test_id: int) -> Row:
    """
    Получить тест с названием категории.

    Raises:
        NotFoundError: Если тест не найден
    """
    result = await session.execute(_test_with_category().where(Test.id == test_id))
    row = result.first()
    if row is None:
        raise NotFoundError(resource_type="Тест", resource_id=test_id)
    return row


async def get_test_items_repo(session: AsyncSession, test_id: int) -> List[Row]:
    """Вопросы теста по порядку вместе с текстами слов."""
    result = await session.execute(
        select(TestItem, Word.english, Word.japanese)
        .join(Word, TestItem.word_id == Word.id)
        .where(TestItem.test_id == test_id)
        .order_by(TestItem.question_order)
    )
    return list(result.all())


async def create_test_repo(
    session: AsyncSession,
    title: str,
    test_type: TestType,
    items: Sequence[Tuple[int, QuestionType]],
    description: Optional[str] = None,
    category_id: Optional[int] = None,
) -> Test:
    """
    Сохранить тест и все его вопросы одной транзакцией.

    Позиции вопросов нумеруются с 1 в порядке ``items``. Счетчик
    использования каждого слова увеличивается на 1. При любой ошибке
    транзакция откатывается целиком.

    Args:
        session: Сессия базы данных
        title: Название теста
        test_type: Объявленный тип теста
        items: Пары (word_id, question_type) в итоговом порядке
        description: Описание
        category_id: Категория, использованная как фильтр

    Returns:
        Сохраненный тест
    """
    try:
        test = Test(
            title=title,
            description=description,
            test_type=test_type,
            question_count=len(items),
            category_id=category_id,
            items=[
                TestItem(
                    word_id=word_id,
                    question_order=position,
                    question_type=question_type,
                )
                for position, (word_id, question_type) in enumerate(items, start=1)
            ],
        )
        session.add(test)
        await session.flush()

        await increment_frequency_repo(session, [word_id for word_id, _ in items])
        await session.commit()
    except Exception as e:
        logger.error(f"Ошибка сохранения теста '{title}': {str(e)}")
        await session.rollback()
        raise

    await session.refresh(test, attribute_names=["created_at"])
    logger.info(f"Тест {test.id} сохранен, вопросов: {test.question_count}")
    return test


async def delete_test_repo(session: AsyncSession, test_id: int) -> None:
    """
    Удалить тест вместе с вопросами и журналом использования.

    Raises:
        NotFoundError: Если тест не найден
    """
    try:
        await session.execute(delete(TestHistory).where(TestHistory.test_id == test_id))
        await session.execute(delete(TestItem).where(TestItem.test_id == test_id))
        result = await session.execute(delete(Test).where(Test.id == test_id))
        if result.rowcount == 0:
            raise NotFoundError(resource_type="Тест", resource_id=test_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    logger.info(f"Тест {test_id} удален")


async def add_history_repo(
    session: AsyncSession, test_id: int, notes: Optional[str] = None
) -> TestHistory:
    """Добавить запись об использовании теста."""
    entry = TestHistory(test_id=test_id, notes=notes)
    session.add(entry)
    try:
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    await session.refresh(entry)
    return entry


async def list_history_repo(session: AsyncSession, test_id: int) -> List[TestHistory]:
    """Журнал использования теста, последние записи первыми."""
    result = await session.execute(
        select(TestHistory)
        .where(TestHistory.test_id == test_id)
        .order_by(TestHistory.used_at.desc(), TestHistory.id.desc())
    )
    return list(result.scalars().all())
