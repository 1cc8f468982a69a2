#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт инициализации базы данных.

Выполняет:
1. Применение миграций (или создание таблиц по моделям, если указан --no-migrations)
2. Создание категории по умолчанию
"""

import argparse
import asyncio
import subprocess
import sys
from pathlib import Path

# Добавляем корень проекта в sys.path
sys.path.append(str(Path(__file__).parent.parent))

from src.clients.database_client import (AsyncSessionLocal, async_engine,  # noqa: E402
                                         ensure_default_category, init_db)
from src.config.logger import configure_logger  # noqa: E402

logger = configure_logger()


async def init_database(use_migrations: bool = True):
    """Инициализация схемы и категории по умолчанию."""
    try:
        print("🚀 Начинаем инициализацию базы данных...")

        if use_migrations:
            print("🔄 Применение миграций...")
            result = subprocess.run(
                ["alembic", "-c", "alembic.ini", "upgrade", "head"],
                capture_output=True,
                text=True,
                cwd=Path(__file__).parent.parent,
            )

            if result.returncode != 0:
                print(f"❌ Ошибка при применении миграций: {result.stderr}")
                print(f"stdout: {result.stdout}")
                sys.exit(1)

            print("✅ Миграции применены успешно")
        else:
            print("🧱 Создание таблиц по моделям...")
            await init_db()
            print("✅ Таблицы созданы")

        print("🏷️ Проверка категории по умолчанию...")
        async with AsyncSessionLocal() as session:
            category = await ensure_default_category(session)
        print(f"✅ Категория по умолчанию: {category.name} (ID {category.id})")

        print("🎉 Инициализация базы данных завершена успешно!")

    except Exception as e:
        logger.error(f"Ошибка при инициализации базы данных: {e}")
        print(f"❌ Ошибка: {e}")
        sys.exit(1)
    finally:
        await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Инициализация базы данных Tango Test")
    parser.add_argument(
        "--no-migrations",
        action="store_true",
        help="Создать таблицы напрямую по моделям, без Alembic",
    )
    args = parser.parse_args()
    asyncio.run(init_database(use_migrations=not args.no_migrations))
