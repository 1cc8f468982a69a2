# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/tests/crud/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сборка и сохранение словарного теста.
"""

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.test_assembly import create_test_service
from src.utils.exceptions import APIException, InternalError

from ..shared.schemas import TestCreatedSchema, TestCreateSchema

router = APIRouter(tags=["📝 Тесты - ➕ Создание"])


@router.post(
    "",
    response_model=ApiResponse[TestCreatedSchema],
    status_code=status.HTTP_201_CREATED,
)
async def create_test_endpoint(
    test_data: TestCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[TestCreatedSchema]:
    """
    Собрать и сохранить тест.

    Слова выбираются диапазоном ID, явным списком или случайно;
    порядок можно перемешать. Для типа ``mixed`` направление вопросов
    чередуется по позиции.

    Raises:
        EmptySelectionError: Если ни одно слово не подошло под критерии
    """
    try:
        logger.info(
            f"Создание теста '{test_data.title}': тип {test_data.test_type.value}, "
            f"выбор {test_data.word_selection.type}"
        )
        data = await create_test_service(session, test_data)
        return ApiResponse[TestCreatedSchema](data=data, message="Тест создан")
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка создания теста: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка создания теста")
