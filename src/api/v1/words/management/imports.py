# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/management/imports.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Импорт слов из JSON и CSV.
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.responses import ApiResponse
from src.clients.database_client import get_db
from src.service.word_import import import_words_service
from src.utils.csv_tools import parse_words_csv
from src.utils.exceptions import APIException, InternalError, ValidationError

from ..shared.schemas import WordImportResultSchema, WordImportSchema

router = APIRouter(prefix="/import", tags=["📚 Слова - 📥 Импорт"])


def _import_response(result: dict) -> ApiResponse[WordImportResultSchema]:
    message = result.pop("message")
    return ApiResponse[WordImportResultSchema](data=result, message=message)


@router.post("", response_model=ApiResponse[WordImportResultSchema])
async def import_words_endpoint(
    import_data: WordImportSchema,
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[WordImportResultSchema]:
    """
    Импортировать слова списком.

    Строки обрабатываются по одной: ошибочные строки попадают в
    ``error_details`` (не более 10), остальные импортируются.
    """
    try:
        logger.info(f"Импорт слов: {len(import_data.words)} строк")
        result = await import_words_service(
            session,
            [row.model_dump() for row in import_data.words],
            skip_duplicates=import_data.options.skip_duplicates,
            create_categories=import_data.options.create_categories,
        )
        return _import_response(result)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка импорта слов: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка импорта слов")


@router.post("/csv", response_model=ApiResponse[WordImportResultSchema])
async def import_words_csv_endpoint(
    file: UploadFile = File(..., description="CSV: english,japanese,category,difficulty"),
    skip_duplicates: bool = Form(True),
    create_categories: bool = Form(True),
    session: AsyncSession = Depends(get_db),
) -> ApiResponse[WordImportResultSchema]:
    """
    Импортировать слова из CSV файла.

    Первая строка файла - заголовок; колонки english и japanese обязательны.
    """
    try:
        logger.info(f"Импорт слов из файла {file.filename}")
        rows = parse_words_csv(await file.read())
        if not rows:
            raise ValidationError("CSV файл не содержит строк для импорта")
        result = await import_words_service(
            session,
            rows,
            skip_duplicates=skip_duplicates,
            create_categories=create_categories,
        )
        return _import_response(result)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка импорта слов из CSV: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка импорта слов из CSV")
