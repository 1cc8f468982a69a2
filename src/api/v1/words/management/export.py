# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/management/export.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Экспорт слов.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.v1.shared.params import MAX_DB_INTEGER
from src.clients.database_client import get_db
from src.service.words import export_words_service
from src.utils.exceptions import APIException, InternalError

router = APIRouter(prefix="/export", tags=["📚 Слова - 📊 Экспорт"])


@router.get("", response_class=Response)
async def export_words_endpoint(
    search: Optional[str] = Query(
        None, description="Поиск по английскому или японскому варианту"
    ),
    category_id: Optional[int] = Query(
        None, ge=1, le=MAX_DB_INTEGER, description="Фильтр по категории"
    ),
    difficulty: Optional[int] = Query(None, ge=1, le=5, description="Фильтр по сложности"),
    session: AsyncSession = Depends(get_db),
) -> Response:
    """
    Экспортировать слова в CSV.

    Файл можно загрузить обратно через импорт CSV.
    """
    try:
        content = await export_words_service(
            session, search=search, category_id=category_id, difficulty=difficulty
        )
        return Response(
            content=content.encode("utf-8-sig"),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": 'attachment; filename="words_export.csv"'},
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Ошибка экспорта слов: {str(e)}")
        logger.exception("Детали ошибки:")
        raise InternalError("Ошибка экспорта слов")
