# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/management/stats.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сводная статистика банка слов.
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.categories import get_stats_overview_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import CategoryStatsSchema

router = APIRouter(prefix="/stats", tags=["🏷️ Категории - 📊 Статистика"])


@router.get("/overview", response_model=ApiResponse[CategoryStatsSchema])
async def get_stats_overview_endpoint(
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[CategoryStatsSchema]:
    """Количество категорий, слов и тестов."""
    try:
        data = await get_stats_overview_service(session)
        return ApiResponse[CategoryStatsSchema](data=data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения статистики: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка получения статистики")
