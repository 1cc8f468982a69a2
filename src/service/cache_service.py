"""
Сервис кэширования для интеграции с Redis.

Этот модуль предоставляет высокоуровневый интерфейс для операций кэширования
с автоматической сериализацией/десериализацией и управлением TTL.
Ошибки Redis никогда не прерывают запрос: они логируются, а вызывающий код
получает промах кэша.
"""

import asyncio
import json
import logging
from typing import Any, Callable, Optional

import redis.asyncio as redis
from redis.asyncio import Redis

from src.config.redis_settings import (get_redis_connection_params,
                                       redis_settings)

logger = logging.getLogger(__name__)


class CacheService:
    """Высокоуровневый сервис кэширования для операций с Redis."""

    def __init__(self, enabled: Optional[bool] = None):
        """
        Инициализирует сервис кэширования.

        Args:
            enabled: Включен ли кэш (по умолчанию из настроек Redis)
        """
        self._redis: Optional[Redis] = None
        self._connection_params = get_redis_connection_params()
        self.enabled = redis_settings.redis_enabled if enabled is None else enabled

    async def get_redis(self) -> Redis:
        """
        Получить подключение к Redis (ленивая инициализация).

        Returns:
            Экземпляр подключения к Redis
        """
        if self._redis is None:
            client = redis.Redis(**self._connection_params)
            try:
                await client.ping()
            except Exception as e:
                logger.error(f"Ошибка подключения к Redis: {e}")
                await client.aclose()
                raise
            self._redis = client
            logger.info("Подключение к Redis установлено успешно")

        return self._redis

    async def ping(self) -> bool:
        """Проверить доступность Redis."""
        if not self.enabled:
            return False
        try:
            redis_client = await self.get_redis()
            return bool(await redis_client.ping())
        except Exception as e:
            logger.warning(f"Redis недоступен: {e}")
            return False

    async def close(self):
        """Закрыть подключение к Redis."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
            logger.info("Подключение к Redis закрыто")

    def _serialize(self, data: Any) -> str:
        try:
            return json.dumps(data, default=str, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Ошибка сериализации данных: {e}")
            raise

    def _deserialize(self, data: str) -> Any:
        try:
            return json.loads(data)
        except (TypeError, ValueError) as e:
            logger.error(f"Ошибка десериализации данных: {e}")
            raise

    def build_key(self, *parts: Any) -> str:
        """
        Построить ключ кэша из префикса приложения и частей.

        Args:
            *parts: Части ключа

        Returns:
            Полный ключ кэша, например ``vocab:test:42``
        """
        return ":".join([redis_settings.cache_prefix, *(str(part) for part in parts)])

    async def get(self, key: str) -> Optional[Any]:
        """
        Получить значение из кэша.

        Args:
            key: Ключ кэша

        Returns:
            Кэшированное значение или None если не найдено
        """
        if not self.enabled:
            return None
        try:
            redis_client = await self.get_redis()
            data = await redis_client.get(key)

            if data is None:
                return None

            return self._deserialize(data)
        except Exception as e:
            logger.error(f"Ошибка получения ключа кэша '{key}': {e}")
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Установить значение в кэш.

        Args:
            key: Ключ кэша
            value: Значение для кэширования
            ttl: Время жизни в секундах

        Returns:
            True если успешно, False в противном случае
        """
        if not self.enabled:
            return False
        try:
            redis_client = await self.get_redis()
            serialized_value = self._serialize(value)

            if ttl:
                await redis_client.setex(key, ttl, serialized_value)
            else:
                await redis_client.set(key, serialized_value)

            return True
        except Exception as e:
            logger.error(f"Ошибка установки ключа кэша '{key}': {e}")
            return False

    async def delete(self, key: str) -> bool:
        """
        Удалить ключ из кэша.

        Returns:
            True если ключ был удален, False в противном случае
        """
        if not self.enabled:
            return False
        try:
            redis_client = await self.get_redis()
            result = await redis_client.delete(key)
            return result > 0
        except Exception as e:
            logger.error(f"Ошибка удаления ключа кэша '{key}': {e}")
            return False

    async def get_or_set(
        self, key: str, fetch_func: Callable, ttl: Optional[int] = None, *args, **kwargs
    ) -> Any:
        """
        Получить значение из кэша или выполнить функцию и кэшировать результат.

        Args:
            key: Ключ кэша
            fetch_func: Функция для выполнения при промахе кэша
            ttl: Время жизни в секундах
            *args: Аргументы для fetch_func
            **kwargs: Именованные аргументы для fetch_func

        Returns:
            Кэшированное или свежеполученное значение
        """
        cached_value = await self.get(key)
        if cached_value is not None:
            logger.debug(f"Попадание в кэш для ключа: {key}")
            return cached_value

        logger.debug(f"Промах кэша для ключа: {key}")
        if asyncio.iscoroutinefunction(fetch_func):
            result = await fetch_func(*args, **kwargs)
        else:
            result = fetch_func(*args, **kwargs)

        await self.set(key, result, ttl)
        return result

    async def invalidate_pattern(self, pattern: str) -> int:
        """
        Удалить все ключи, соответствующие паттерну.

        Args:
            pattern: Паттерн ключей Redis (например, "vocab:test:*")

        Returns:
            Количество удаленных ключей
        """
        if not self.enabled:
            return 0
        try:
            redis_client = await self.get_redis()
            keys = [key async for key in redis_client.scan_iter(match=pattern)]

            if keys:
                deleted = await redis_client.delete(*keys)
                logger.info(
                    f"Инвалидировано {deleted} ключей, соответствующих паттерну: {pattern}"
                )
                return deleted

            return 0
        except Exception as e:
            logger.error(f"Ошибка инвалидации паттерна '{pattern}': {e}")
            return 0

    async def invalidate_test_cache(self, test_id: int) -> int:
        """
        Инвалидировать кэш теста и сводной статистики.

        Args:
            test_id: ID теста

        Returns:
            Количество удаленных ключей
        """
        deleted = 0
        if await self.delete(self.build_key("test", test_id)):
            deleted += 1
        if await self.delete(self.build_key("stats", "overview")):
            deleted += 1
        return deleted

    async def invalidate_vocabulary_cache(self) -> int:
        """
        Инвалидировать кэш, зависящий от слов и категорий.

        Карточки тестов содержат тексты слов, поэтому сбрасываются вместе
        со статистикой.

        Returns:
            Количество удаленных ключей
        """
        total_deleted = 0
        for pattern in (self.build_key("test", "*"), self.build_key("stats", "*")):
            total_deleted += await self.invalidate_pattern(pattern)

        logger.info(f"Инвалидировано {total_deleted} записей кэша словаря")
        return total_deleted


# Глобальный экземпляр сервиса кэширования
cache_service = CacheService()


async def get_or_set_test(test_id: int, fetch_func: Callable, *args, **kwargs) -> Any:
    """
    Получить или установить карточку теста в кэше.

    Args:
        test_id: ID теста
        fetch_func: Функция для выполнения при промахе кэша

    Returns:
        Кэшированное или свежеполученное значение
    """
    key = cache_service.build_key("test", test_id)
    return await cache_service.get_or_set(
        key, fetch_func, redis_settings.cache_ttl_test, *args, **kwargs
    )


async def get_or_set_stats(fetch_func: Callable, *args, **kwargs) -> Any:
    """Получить или установить сводную статистику в кэше."""
    key = cache_service.build_key("stats", "overview")
    return await cache_service.get_or_set(
        key, fetch_func, redis_settings.cache_ttl_stats, *args, **kwargs
    )
