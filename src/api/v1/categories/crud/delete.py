# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/crud/delete.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для удаления категорий.
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.categories import delete_category_service
from src.utils.exceptions import APIException, InternalError

router = APIRouter(tags=["🏷️ Категории - 🗑️ Удаление"])


@router.delete("/{category_id}", response_model=ApiResponse[None])
async def delete_category_endpoint(
    category_id: IdPath,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[None]:
    """
    Удалить категорию.

    Слова категории переносятся в категорию по умолчанию (ID 1),
    которую удалить нельзя.
    """
    try:
        logger.info(f"Удаление категории {category_id}")
        moved = await delete_category_service(session, category_id)
        return ApiResponse[None](
            message=f"Категория удалена, слов перенесено в категорию по умолчанию: {moved}"
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка удаления категории {category_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка удаления категории")
