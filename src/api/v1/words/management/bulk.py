# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/management/bulk.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Массовые операции со словами.
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.words import bulk_delete_words_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import WordBulkDeleteResultSchema, WordBulkDeleteSchema

router = APIRouter(tags=["📚 Слова - 📦 Массовые операции"])


@router.delete("", response_model=ApiResponse[WordBulkDeleteResultSchema])
async def bulk_delete_words_endpoint(
    delete_data: WordBulkDeleteSchema,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[WordBulkDeleteResultSchema]:
    """
    Удалить несколько слов по списку ID.

    Если хотя бы одно слово используется в тестах, ничего не удаляется.
    В ответе ``deletedCount`` - количество фактически удаленных слов.
    """
    try:
        logger.info(f"Массовое удаление слов: {delete_data.ids}")
        deleted = await bulk_delete_words_service(session, delete_data.ids)
        return ApiResponse[WordBulkDeleteResultSchema](
            data=WordBulkDeleteResultSchema(deleted_count=deleted),
            message=f"Удалено слов: {deleted}",
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка массового удаления слов: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка массового удаления слов")
