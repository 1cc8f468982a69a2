# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/shared/responses.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Конверт ответа ``{success, data?, error?, message?}`` для всех JSON эндпоинтов.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Единый конверт ответа API."""

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None


def error_payload(error: str, message: Optional[str] = None) -> dict:
    """Тело ответа с ошибкой в формате конверта."""
    payload = {"success": False, "error": error}
    if message:
        payload["message"] = message
    return payload
