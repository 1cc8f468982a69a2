# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/crud/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для чтения слов.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import MAX_DB_INTEGER, IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.config.settings import settings
from src.service.words import get_word_service, list_words_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import WordListSchema, WordReadSchema

router = APIRouter(tags=["📚 Слова - 📖 Чтение"])


@router.get("", response_model=ApiResponse[WordListSchema])
async def list_words_endpoint(
    search: Optional[str] = Query(
        None, description="Поиск по английскому или японскому варианту"
    ),
    category_id: Optional[int] = Query(
        None, ge=1, le=MAX_DB_INTEGER, description="Фильтр по категории"
    ),
    difficulty: Optional[int] = Query(
        None, ge=1, le=5, description="Фильтр по сложности"
    ),
    limit: int = Query(
        settings.words_page_limit,
        ge=1,
        le=settings.words_page_limit_max,
        description="Максимальное количество записей",
    ),
    offset: int = Query(
        0, ge=0, le=MAX_DB_INTEGER, description="Количество пропускаемых записей"
    ),
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[WordListSchema]:
    """
    Получить список слов с фильтрацией.

    Слова отсортированы по убыванию ID, каждое содержит название категории.
    """
    try:
        logger.info(
            f"Запрос списка слов: search={search}, category_id={category_id}, "
            f"difficulty={difficulty}, limit={limit}, offset={offset}"
        )
        data = await list_words_service(
            session,
            search=search,
            category_id=category_id,
            difficulty=difficulty,
            limit=limit,
            offset=offset,
        )
        return ApiResponse[WordListSchema](data=data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения списка слов: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка получения списка слов")


@router.get("/{word_id}", response_model=ApiResponse[WordReadSchema])
async def get_word_endpoint(
    word_id: IdPath,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[WordReadSchema]:
    """
    Получить слово по ID.

    Raises:
        NotFoundError: Если слово не найдено
    """
    try:
        data = await get_word_service(session, word_id)
        return ApiResponse[WordReadSchema](data=data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения слова {word_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка получения слова")
