# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/crud/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для обновления категорий.
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.categories import update_category_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import CategoryReadSchema, CategoryUpdateSchema

router = APIRouter(tags=["🏷️ Категории - ✏️ Обновление"])


@router.put("/{category_id}", response_model=ApiResponse[CategoryReadSchema])
async def update_category_endpoint(
    category_id: IdPath,
    category_data: CategoryUpdateSchema,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[CategoryReadSchema]:
    """Обновить название и описание категории."""
    try:
        logger.info(f"Обновление категории {category_id}")
        data = await update_category_service(
            session,
            category_id,
            name=category_data.name,
            description=category_data.description,
        )
        return ApiResponse[CategoryReadSchema](data=data, message="Категория обновлена")
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка обновления категории {category_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка обновления категории")
