# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/service/test_assembly.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сборка словарного теста.

Конвейер: выбор слов -> порядок (опционально перемешанный) ->
направление каждого вопроса -> сохранение или предпросмотр.
Выбор только читает хранилище; сохранение выполняется одной транзакцией.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.tests.shared.schemas import (IndividualSelectionSchema,
                                             RandomSelectionSchema,
                                             RangeSelectionSchema,
                                             TestPreviewRequestSchema,
                                             WordSelectionSchema)
from src.config.logger import configure_logger
from src.domain.enums import QuestionType, TestType
from src.domain.models import Category, Word
from src.repository.base import get_item
from src.repository.tests import create_test_repo
from src.repository.words import (WordRow, get_random_words_repo,
                                  get_words_by_ids_repo,
                                  get_words_in_range_repo)
from src.service.cache_service import cache_service
from src.service.words import serialize_word
from src.utils.exceptions import EmptySelectionError, ValidationError

logger = configure_logger(__name__)

T = TypeVar("T")


@dataclass
class AssembledItem:
    """Вопрос собранного теста до сохранения."""

    question_order: int
    question_type: QuestionType
    word: Word
    category_name: Optional[str] = None


# ---------------------------------------------------------------------------
# Выбор слов
# ---------------------------------------------------------------------------


async def select_words(
    session: AsyncSession,
    selection: WordSelectionSchema,
    category_id: Optional[int] = None,
) -> List[WordRow]:
    """
    Выбрать слова по запросу выбора.

    * ``range`` - слова с ID в [start_id, end_id] по возрастанию ID,
      с фильтром по категории, если он задан;
    * ``individual`` - слова из списка ID (повторы схлопываются,
      несуществующие ID пропускаются, фильтр категории не применяется);
    * ``random`` - равномерная выборка не более ``count`` слов из
      (отфильтрованного) пула.

    Args:
        session: Сессия базы данных
        selection: Запрос выбора
        category_id: Необязательный фильтр категории

    Returns:
        Выбранные слова (может быть пустым списком)
    """
    if isinstance(selection, RangeSelectionSchema):
        return await get_words_in_range_repo(
            session, selection.start_id, selection.end_id, category_id
        )
    if isinstance(selection, IndividualSelectionSchema):
        return await get_words_by_ids_repo(session, selection.word_ids)
    if isinstance(selection, RandomSelectionSchema):
        return await get_random_words_repo(session, selection.count, category_id)
    raise ValidationError(f"Неизвестный способ выбора слов: {selection!r}")


# ---------------------------------------------------------------------------
# Порядок и направление вопросов
# ---------------------------------------------------------------------------


def order_words(
    words: Sequence[T], randomize: bool, rng: Optional[random.Random] = None
) -> List[T]:
    """
    Вернуть новый список слов в итоговом порядке.

    При ``randomize`` применяется перемешивание Фишера-Йетса
    (``random.shuffle``): все перестановки равновероятны.
    Входная последовательность не изменяется.
    """
    ordered = list(words)
    if randomize:
        (rng or random).shuffle(ordered)
    return ordered


def assign_question_types(count: int, test_type: TestType) -> List[QuestionType]:
    """
    Направление вопроса для каждой итоговой позиции.

    Для ``mixed`` четные позиции (с нуля) - english_to_japanese,
    нечетные - japanese_to_english.
    """
    test_type = TestType(test_type)
    if test_type == TestType.MIXED:
        return [
            QuestionType.ENGLISH_TO_JAPANESE
            if position % 2 == 0
            else QuestionType.JAPANESE_TO_ENGLISH
            for position in range(count)
        ]
    return [QuestionType(test_type.value)] * count


async def assemble_test(
    session: AsyncSession,
    request: TestPreviewRequestSchema,
    rng: Optional[random.Random] = None,
) -> List[AssembledItem]:
    """
    Собрать упорядоченный список вопросов без сохранения.

    Raises:
        NotFoundError: Если указана несуществующая категория
        EmptySelectionError: Если ни одно слово не подошло под критерии
    """
    if request.category_id is not None:
        await get_item(session, Category, request.category_id)

    words = await select_words(session, request.word_selection, request.category_id)
    if not words:
        logger.info(
            f"Пустая выборка слов: {request.word_selection.type}, "
            f"категория {request.category_id}"
        )
        raise EmptySelectionError()

    ordered = order_words(words, request.randomize_order, rng)
    question_types = assign_question_types(len(ordered), request.test_type)
    return [
        AssembledItem(
            question_order=position,
            question_type=question_type,
            word=row[0],
            category_name=row[1],
        )
        for position, (row, question_type) in enumerate(
            zip(ordered, question_types), start=1
        )
    ]


# ---------------------------------------------------------------------------
# Предпросмотр и сохранение
# ---------------------------------------------------------------------------


async def preview_test_service(
    session: AsyncSession,
    request: TestPreviewRequestSchema,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """Собрать тест и вернуть вопросы, ничего не записывая."""
    items = await assemble_test(session, request, rng)
    return {
        "items": [
            {
                "question_order": item.question_order,
                "question_type": item.question_type,
                "word": serialize_word(item.word, item.category_name),
            }
            for item in items
        ],
        "total_questions": len(items),
    }


async def create_test_service(
    session: AsyncSession,
    request: TestPreviewRequestSchema,
    rng: Optional[random.Random] = None,
) -> Dict[str, int]:
    """
    Собрать и сохранить тест.

    Тест, все его вопросы и увеличение счетчиков использования слов
    фиксируются одной транзакцией: при ошибке не сохраняется ничего.

    Returns:
        ``{"id": ..., "question_count": ...}``
    """
    items = await assemble_test(session, request, rng)
    test = await create_test_repo(
        session,
        title=request.title,
        test_type=request.test_type,
        items=[(item.word.id, item.question_type) for item in items],
        description=request.description,
        category_id=request.category_id,
    )
    await cache_service.delete(cache_service.build_key("stats", "overview"))
    return {"id": test.id, "question_count": test.question_count}
