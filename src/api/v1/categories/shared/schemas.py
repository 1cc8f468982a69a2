# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic схемы для эндпоинтов категорий.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryCreateSchema(BaseModel):
    """Схема для создания категории."""

    name: str = Field(..., max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Название категории не может быть пустым")
        return value


class CategoryUpdateSchema(CategoryCreateSchema):
    """Схема для обновления категории (название обязательно)."""


class CategoryReadSchema(BaseModel):
    """Схема для чтения категории."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    word_count: int = 0


class CategoryStatsSchema(BaseModel):
    """Сводная статистика банка слов."""

    categories: int
    words: int
    tests: int
