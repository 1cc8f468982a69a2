# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/crud/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для создания слов.
"""

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.words import create_word_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import WordCreateSchema, WordReadSchema

router = APIRouter(tags=["📚 Слова - ➕ Создание"])


@router.post(
    "",
    response_model=ApiResponse[WordReadSchema],
    status_code=status.HTTP_201_CREATED,
)
async def create_word_endpoint(
    word_data: WordCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[WordReadSchema]:
    """
    Создать новое слово.

    Args:
        word_data: Английский и японский варианты, категория (по умолчанию 1)
            и сложность 1-5 (по умолчанию 1)
        session: Сессия базы данных

    Returns:
        Созданное слово
    """
    try:
        logger.info(f"Создание слова: {word_data.english} / {word_data.japanese}")
        data = await create_word_service(session, **word_data.model_dump())
        return ApiResponse[WordReadSchema](data=data, message="Слово создано")
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка создания слова: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка создания слова")
