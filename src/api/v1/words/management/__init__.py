# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/management/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Операции управления банком слов: массовое удаление, импорт, экспорт.
"""

from .bulk import router as bulk_router
from .export import router as export_router
from .imports import router as imports_router
from .range import router as range_router

__all__ = ["bulk_router", "export_router", "imports_router", "range_router"]
