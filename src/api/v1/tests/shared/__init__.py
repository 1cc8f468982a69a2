# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/tests/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты для работы с тестами.
"""

from .schemas import (IndividualSelectionSchema, PreviewItemSchema,
                      RandomSelectionSchema, RangeSelectionSchema,
                      TestCreatedSchema, TestCreateSchema, TestDetailSchema,
                      TestHistoryCreateSchema, TestHistoryReadSchema,
                      TestItemReadSchema, TestListSchema,
                      TestPreviewRequestSchema, TestPreviewSchema,
                      TestReadSchema, WordSelectionSchema)

__all__ = [
    "IndividualSelectionSchema",
    "PreviewItemSchema",
    "RandomSelectionSchema",
    "RangeSelectionSchema",
    "TestCreatedSchema",
    "TestCreateSchema",
    "TestDetailSchema",
    "TestHistoryCreateSchema",
    "TestHistoryReadSchema",
    "TestItemReadSchema",
    "TestListSchema",
    "TestPreviewRequestSchema",
    "TestPreviewSchema",
    "TestReadSchema",
    "WordSelectionSchema",
]
