# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/tests/management/history.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Журнал использования тестов.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import IdPath
from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.tests import (list_test_history_service,
                               record_test_usage_service)
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import TestHistoryCreateSchema, TestHistoryReadSchema

router = APIRouter(tags=["📝 Тесты - 🕓 История"])


@router.post(
    "/{test_id}/history",
    response_model=ApiResponse[TestHistoryReadSchema],
    status_code=status.HTTP_201_CREATED,
)
async def record_test_usage_endpoint(
    test_id: IdPath,
    history_data: Optional[TestHistoryCreateSchema] = None,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[TestHistoryReadSchema]:
    """Записать использование теста (например, проведение в классе)."""
    try:
        notes = history_data.notes if history_data is not None else None
        data = await record_test_usage_service(session, test_id, notes)
        return ApiResponse[TestHistoryReadSchema](
            data=data, message="Использование теста записано"
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка записи использования теста {test_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка записи использования теста")


@router.get(
    "/{test_id}/history", response_model=ApiResponse[List[TestHistoryReadSchema]]
)
async def list_test_history_endpoint(
    test_id: IdPath,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[List[TestHistoryReadSchema]]:
    """Журнал использования теста, последние записи первыми."""
    try:
        data = await list_test_history_service(session, test_id)
        return ApiResponse[List[TestHistoryReadSchema]](data=data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения истории теста {test_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка получения истории теста")
