#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт импорта слов из CSV файла.

Формат файла: english,japanese,category,difficulty (заголовок обязателен,
category и difficulty необязательны).

Пример:
    python scripts/import_words.py words.csv --no-create-categories
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Добавляем корень проекта в sys.path
sys.path.append(str(Path(__file__).parent.parent))

from src.clients.database_client import AsyncSessionLocal, async_engine  # noqa: E402
from src.config.logger import configure_logger  # noqa: E402
from src.service.word_import import import_words_service  # noqa: E402
from src.utils.csv_tools import parse_words_csv  # noqa: E402
from src.utils.exceptions import APIException  # noqa: E402

logger = configure_logger()


async def import_words(path: Path, skip_duplicates: bool, create_categories: bool):
    """Импортирует слова из CSV файла и печатает итог."""
    try:
        rows = parse_words_csv(path.read_bytes())
        print(f"📥 Прочитано строк: {len(rows)}")

        async with AsyncSessionLocal() as session:
            result = await import_words_service(
                session,
                rows,
                skip_duplicates=skip_duplicates,
                create_categories=create_categories,
            )

        print(f"✅ {result['message']}")
        for detail in result["error_details"]:
            print(f"   ⚠️ {detail}")

    except APIException as e:
        print(f"❌ {e.detail}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Ошибка импорта слов из {path}: {e}")
        print(f"❌ Ошибка: {e}")
        sys.exit(1)
    finally:
        await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Импорт слов из CSV")
    parser.add_argument("path", type=Path, help="Путь к CSV файлу")
    parser.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Не пропускать слова, которые уже есть в банке",
    )
    parser.add_argument(
        "--no-create-categories",
        action="store_true",
        help="Не создавать отсутствующие категории (такие строки попадут в ошибки)",
    )
    args = parser.parse_args()

    if not args.path.exists():
        print(f"❌ Файл не найден: {args.path}")
        sys.exit(1)

    asyncio.run(
        import_words(
            args.path,
            skip_duplicates=not args.keep_duplicates,
            create_categories=not args.no_create_categories,
        )
    )
