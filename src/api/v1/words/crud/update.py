# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/crud/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для обновления слов.
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.words import update_word_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import WordReadSchema, WordUpdateSchema

router = APIRouter(tags=["📚 Слова - ✏️ Обновление"])


@router.put("/{word_id}", response_model=ApiResponse[WordReadSchema])
async def update_word_endpoint(
    word_id: IdPath,
    word_data: WordUpdateSchema,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[WordReadSchema]:
    """
    Обновить слово. Переданные поля заменяются, остальные не меняются.
    """
    try:
        logger.info(f"Обновление слова {word_id}")
        data = await update_word_service(
            session, word_id, **word_data.model_dump(exclude_unset=True)
        )
        return ApiResponse[WordReadSchema](data=data, message="Слово обновлено")
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка обновления слова {word_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка обновления слова")
