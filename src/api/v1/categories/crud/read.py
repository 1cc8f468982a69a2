# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/crud/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для чтения категорий.
"""

from typing import List

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.categories import (get_category_service,
                                    list_categories_service)
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import CategoryReadSchema

router = APIRouter(tags=["🏷️ Категории - 📖 Чтение"])


@router.get("", response_model=ApiResponse[List[CategoryReadSchema]])
async def list_categories_endpoint(
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[List[CategoryReadSchema]]:
    """Получить все категории с количеством слов в каждой."""
    try:
        data = await list_categories_service(session)
        return ApiResponse[List[CategoryReadSchema]](data=data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения списка категорий: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка получения списка категорий")


@router.get("/{category_id}", response_model=ApiResponse[CategoryReadSchema])
async def get_category_endpoint(
    category_id: IdPath,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[CategoryReadSchema]:
    """Получить категорию по ID."""
    try:
        data = await get_category_service(session, category_id)
        return ApiResponse[CategoryReadSchema](data=data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения категории {category_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка получения категории")
