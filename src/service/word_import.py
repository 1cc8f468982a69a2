# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/service/word_import.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Массовый импорт слов.

Строки обрабатываются по одной; ошибка в строке не прерывает импорт.
Каждая строка выполняется в собственной точке сохранения, поэтому
сбой откатывает только ее изменения.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import settings
from src.domain.models import Category, Word
from src.repository.categories import get_category_by_name_repo
from src.repository.words import find_duplicate_word_repo
from src.service.cache_service import cache_service

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5


class RowError(Exception):
    """Ожидаемая ошибка строки импорта (строка пропускается)."""


def normalize_difficulty(value: Any) -> int:
    """
    Привести сложность к целому в диапазоне 1..5.

    Отсутствующее или нечисловое значение дает 1.
    """
    if value is None or isinstance(value, bool):
        return MIN_DIFFICULTY
    try:
        difficulty = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return MIN_DIFFICULTY
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, difficulty))


def build_import_message(imported: int, skipped: int, errors: int) -> str:
    message = f"Импортировано слов: {imported}"
    if skipped:
        message += f", пропущено дубликатов: {skipped}"
    if errors:
        message += f", ошибок: {errors}"
    return message


async def _resolve_category_id(
    session: AsyncSession,
    category_name: Optional[str],
    english: str,
    create_categories: bool,
    cache: Dict[str, int],
) -> int:
    if not category_name or category_name == settings.default_category_name:
        return settings.default_category_id
    if category_name in cache:
        return cache[category_name]

    category = await get_category_by_name_repo(session, category_name)
    if category is None:
        if not create_categories:
            raise RowError(
                f'Категория "{category_name}" не найдена для слова: {english}'
            )
        category = Category(
            name=category_name,
            description=f"Imported category: {category_name}",
        )
        session.add(category)
        await session.flush()
        logger.info(f"Создана категория при импорте: {category_name} (ID {category.id})")

    cache[category_name] = category.id
    return category.id


async def import_words_service(
    session: AsyncSession,
    rows: Iterable[Mapping[str, Any]],
    skip_duplicates: bool = True,
    create_categories: bool = True,
) -> Dict[str, Any]:
    """
    Импортировать слова.

    Args:
        session: Сессия базы данных
        rows: Строки с ключами english, japanese, category?, difficulty?
        skip_duplicates: Пропускать слова, совпадающие с существующими
            по английскому ИЛИ японскому варианту
        create_categories: Создавать отсутствующие категории

    Returns:
        ``{imported, skipped, errors, total_processed, error_details, message}``
    """
    imported = 0
    skipped = 0
    errors: List[str] = []
    # Категории, созданные откатанной строкой, в кэш не попадают
    category_cache: Dict[str, int] = {}

    for row in rows:
        english = (row.get("english") or "").strip()
        japanese = (row.get("japanese") or "").strip()
        if not english or not japanese:
            errors.append("Строка пропущена: отсутствует english или japanese")
            continue

        try:
            if skip_duplicates and await find_duplicate_word_repo(
                session, english, japanese
            ):
                skipped += 1
                continue

            async with session.begin_nested():
                row_cache = dict(category_cache)
                category_id = await _resolve_category_id(
                    session,
                    (row.get("category") or "").strip() or None,
                    english,
                    create_categories,
                    row_cache,
                )
                session.add(
                    Word(
                        english=english,
                        japanese=japanese,
                        category_id=category_id,
                        difficulty=normalize_difficulty(row.get("difficulty")),
                    )
                )
            category_cache = row_cache
            imported += 1
        except RowError as e:
            errors.append(str(e))
        except Exception as e:
            logger.warning(f"Ошибка импорта слова {english}: {e}")
            errors.append(f"Ошибка импорта слова {english}: {e}")

    await session.commit()
    if imported:
        await cache_service.invalidate_vocabulary_cache()

    message = build_import_message(imported, skipped, len(errors))
    logger.info(message)
    return {
        "imported": imported,
        "skipped": skipped,
        "errors": len(errors),
        "total_processed": imported + skipped + len(errors),
        "error_details": errors[: settings.import_error_details_limit],
        "message": message,
    }
