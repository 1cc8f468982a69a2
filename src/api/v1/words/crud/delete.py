# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/crud/delete.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для удаления слов.
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.words import delete_word_service
from src.utils.exceptions import APIException, InternalError

router = APIRouter(tags=["📚 Слова - 🗑️ Удаление"])


@router.delete("/{word_id}", response_model=ApiResponse[None])
async def delete_word_endpoint(
    word_id: IdPath,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[None]:
    """
    Удалить слово.

    Слово, которое используется в сохраненных тестах, удалить нельзя.
    """
    try:
        logger.info(f"Удаление слова {word_id}")
        await delete_word_service(session, word_id)
        return ApiResponse[None](message="Слово удалено")
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка удаления слова {word_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка удаления слова")
