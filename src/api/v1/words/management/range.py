# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/management/range.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Выборка слов по диапазону ID (для подготовки тестов).
"""

from typing import List

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.words import get_words_by_range_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import WordReadSchema

router = APIRouter(prefix="/range", tags=["📚 Слова - 🔢 Диапазон"])


@router.get("/{start_id}/{end_id}", response_model=ApiResponse[List[WordReadSchema]])
async def get_words_by_range_endpoint(
    start_id: IdPath,
    end_id: IdPath,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[List[WordReadSchema]]:
    """
    Получить слова с ID от start_id до end_id включительно.

    Raises:
        ValidationError: Если start_id больше end_id
    """
    try:
        data = await get_words_by_range_service(session, start_id, end_id)
        return ApiResponse[List[WordReadSchema]](data=data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка выборки слов {start_id}-{end_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка выборки слов по диапазону")
