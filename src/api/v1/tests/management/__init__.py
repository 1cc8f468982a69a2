# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/tests/management/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Предпросмотр и журнал использования тестов.
"""

from .history import router as history_router
from .preview import router as preview_router

__all__ = ["history_router", "preview_router"]
