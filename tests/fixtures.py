# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования банка слов и тестов
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain import models
from src.domain.enums import QuestionType, TestType
from src.repository.base import create_item
from src.repository.tests import create_test_repo

WORD_PAIRS = [
    ("apple", "りんご"),
    ("book", "本"),
    ("cat", "猫"),
    ("dog", "犬"),
    ("egg", "卵"),
    ("fish", "魚"),
    ("garden", "庭"),
    ("house", "家"),
    ("ice", "氷"),
    ("juice", "ジュース"),
    ("key", "鍵"),
    ("lamp", "ランプ"),
]


async def create_test_category(
    session: AsyncSession, name: str = "Animals", description: Optional[str] = None
) -> models.Category:
    """Создать тестовую категорию"""
    return await create_item(
        session, models.Category, name=name, description=description
    )


async def create_test_word(
    session: AsyncSession,
    english: str = "apple",
    japanese: str = "りんご",
    category_id: int = 1,
    difficulty: int = 1,
) -> models.Word:
    """Создать тестовое слово"""
    return await create_item(
        session,
        models.Word,
        english=english,
        japanese=japanese,
        category_id=category_id,
        difficulty=difficulty,
    )


async def create_test_words(
    session: AsyncSession, count: int = 10, category_id: int = 1
) -> List[models.Word]:
    """Создать несколько слов подряд (ID 1..count на пустой базе)"""
    words = []
    for english, japanese in WORD_PAIRS[:count]:
        words.append(
            await create_test_word(
                session, english=english, japanese=japanese, category_id=category_id
            )
        )
    return words


async def create_saved_test(
    session: AsyncSession,
    word_ids: List[int],
    title: str = "Saved Test",
    category_id: Optional[int] = None,
) -> models.Test:
    """Сохранить тест english_to_japanese из указанных слов"""
    return await create_test_repo(
        session,
        title=title,
        test_type=TestType.ENGLISH_TO_JAPANESE,
        items=[(word_id, QuestionType.ENGLISH_TO_JAPANESE) for word_id in word_ids],
        category_id=category_id,
    )


async def fetch_all_words(session: AsyncSession) -> List[models.Word]:
    """Все слова из базы, по возрастанию ID (в обход identity map)"""
    result = await session.execute(
        select(models.Word)
        .order_by(models.Word.id)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())
