# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic схемы для эндпоинтов банка слов.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.api.v1.shared.params import MAX_DB_INTEGER, EntityId
from src.config.settings import settings


def _strip_required(value: Optional[str], field_name: str) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError(f"Поле {field_name} не может быть пустым")
    return value


class WordCreateSchema(BaseModel):
    """Схема для создания слова."""

    english: str = Field(..., max_length=255)
    japanese: str = Field(..., max_length=255)
    category_id: int = Field(
        default_factory=lambda: settings.default_category_id, ge=1, le=MAX_DB_INTEGER
    )
    difficulty: int = Field(1, ge=1, le=5)

    @field_validator("english", "japanese")
    @classmethod
    def validate_not_blank(cls, value: str, info) -> str:
        return _strip_required(value, info.field_name)


class WordUpdateSchema(BaseModel):
    """Схема для частичного обновления слова."""

    english: Optional[str] = Field(None, max_length=255)
    japanese: Optional[str] = Field(None, max_length=255)
    category_id: Optional[EntityId] = None
    difficulty: Optional[int] = Field(None, ge=1, le=5)

    @field_validator("english", "japanese")
    @classmethod
    def validate_not_blank(cls, value: Optional[str], info) -> Optional[str]:
        return _strip_required(value, info.field_name)


class WordReadSchema(BaseModel):
    """Схема для чтения слова вместе с названием категории."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    english: str
    japanese: str
    category_id: int
    category_name: Optional[str] = None
    difficulty: int
    frequency: int
    created_at: datetime
    updated_at: datetime


class WordListSchema(BaseModel):
    """Страница слов."""

    words: List[WordReadSchema]
    total: int
    limit: int
    offset: int


class WordBulkDeleteSchema(BaseModel):
    """Запрос на массовое удаление слов."""

    ids: List[EntityId] = Field(..., min_length=1)


class WordBulkDeleteResultSchema(BaseModel):
    """Результат массового удаления."""

    deleted_count: int = Field(..., serialization_alias="deletedCount")


# ---------------------------------------------------------------------------
# Импорт
# ---------------------------------------------------------------------------


class WordImportRowSchema(BaseModel):
    """
    Строка импорта.

    Пустые english/japanese и нечисловая сложность не отклоняют весь
    запрос: такие строки обрабатываются импортером построчно.
    """

    english: Optional[str] = None
    japanese: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[Union[int, float, str]] = None


class WordImportOptionsSchema(BaseModel):
    """Параметры импорта."""

    skip_duplicates: bool = True
    create_categories: bool = True


class WordImportSchema(BaseModel):
    """Запрос на импорт слов."""

    words: List[WordImportRowSchema] = Field(..., min_length=1)
    options: WordImportOptionsSchema = Field(default_factory=WordImportOptionsSchema)


class WordImportResultSchema(BaseModel):
    """Итог импорта."""

    imported: int
    skipped: int
    errors: int
    total_processed: int
    error_details: List[str]
