# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/crud/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для создания категорий.
"""

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.categories import create_category_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import CategoryCreateSchema, CategoryReadSchema

router = APIRouter(tags=["🏷️ Категории - ➕ Создание"])


@router.post(
    "",
    response_model=ApiResponse[CategoryReadSchema],
    status_code=status.HTTP_201_CREATED,
)
async def create_category_endpoint(
    category_data: CategoryCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[CategoryReadSchema]:
    """
    Создать категорию.

    Raises:
        ConflictError: Если категория с таким названием уже существует
    """
    try:
        logger.info(f"Создание категории: {category_data.name}")
        data = await create_category_service(
            session, name=category_data.name, description=category_data.description
        )
        return ApiResponse[CategoryReadSchema](data=data, message="Категория создана")
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка создания категории: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка создания категории")
