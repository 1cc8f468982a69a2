# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты для работы с категориями.
"""

from .schemas import (CategoryCreateSchema, CategoryReadSchema,
                      CategoryStatsSchema, CategoryUpdateSchema)

__all__ = [
    "CategoryCreateSchema",
    "CategoryReadSchema",
    "CategoryStatsSchema",
    "CategoryUpdateSchema",
]
