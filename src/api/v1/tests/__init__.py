# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/tests/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Маршруты словарных тестов.
"""

from .routes import router

__all__ = ["router"]
