# -*- coding: utf-8 -*-
"""
Менеджер миграций для автоматической проверки и применения миграций.
"""

import subprocess
from pathlib import Path
from typing import Optional

from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine

from src.clients.database_client import async_engine
from src.config.logger import configure_logger
from src.config.settings import settings

logger = configure_logger()

PROJECT_ROOT = Path(__file__).parent.parent.parent


async def get_current_migration_version(
    engine: AsyncEngine = async_engine,
) -> Optional[str]:
    """
    Получает текущую версию миграции из базы данных.

    Returns:
        Текущая версия миграции или None, если таблица alembic_version отсутствует
    """
    try:
        async with engine.connect() as conn:
            table_exists = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).has_table("alembic_version")
            )
            if not table_exists:
                logger.warning("⚠️ Таблица alembic_version не найдена")
                return None

            result = await conn.execute(text("SELECT version_num FROM alembic_version"))
            return result.scalar()

    except Exception as e:
        logger.error(f"❌ Ошибка при получении версии миграции: {e}")
        return None


def get_latest_migration_version() -> Optional[str]:
    """
    Получает последнюю версию миграции из файлов Alembic.

    Returns:
        Ревизия head или None, если скрипты миграций не найдены
    """
    try:
        config = Config(str(PROJECT_ROOT / "alembic.ini"))
        config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
        return ScriptDirectory.from_config(config).get_current_head()
    except Exception as e:
        logger.warning(f"⚠️ Ошибка при получении последней версии миграции: {e}")
        return None


async def run_migrations() -> bool:
    """
    Запускает ``alembic upgrade head`` в отдельном процессе.

    env.py сам управляет событийным циклом, поэтому вызывать его
    из работающего цикла приложения нельзя.
    """
    try:
        result = subprocess.run(
            ["alembic", "upgrade", "head"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )

        if result.returncode == 0:
            logger.info("✅ Миграции успешно применены")
            return True

        logger.error(f"❌ Ошибка при применении миграций: {result.stderr}")
        logger.error(f"❌ stdout: {result.stdout}")
        return False

    except Exception as e:
        logger.error(f"❌ Ошибка при запуске миграций: {e}")
        return False


async def check_and_apply_migrations() -> bool:
    """
    Проверяет и применяет миграции при необходимости.

    Returns:
        True, если схема актуальна после проверки
    """
    if not settings.auto_migrate:
        logger.info("⚙️ AUTO_MIGRATE=false — автоприменение миграций отключено")
        return False

    current_version = await get_current_migration_version()
    latest_version = get_latest_migration_version()

    if current_version is not None and current_version == latest_version:
        logger.info("✅ Миграции актуальны")
        return True

    if current_version is None:
        logger.info("🔄 База данных пустая, применяем миграции...")
    else:
        logger.info(
            f"🔄 Обнаружены новые миграции: {current_version} -> {latest_version}"
        )

    success = await run_migrations()
    if not success:
        logger.warning("⚠️ Не удалось применить миграции, но продолжаем работу")
    return success
