# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты для работы со словами.
"""

from .schemas import (WordBulkDeleteResultSchema, WordBulkDeleteSchema,
                      WordCreateSchema, WordImportOptionsSchema,
                      WordImportResultSchema, WordImportRowSchema,
                      WordImportSchema, WordListSchema, WordReadSchema,
                      WordUpdateSchema)

__all__ = [
    "WordBulkDeleteResultSchema",
    "WordBulkDeleteSchema",
    "WordCreateSchema",
    "WordImportOptionsSchema",
    "WordImportResultSchema",
    "WordImportRowSchema",
    "WordImportSchema",
    "WordListSchema",
    "WordReadSchema",
    "WordUpdateSchema",
]
