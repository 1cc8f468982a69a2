# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Маршруты категорий.
"""

from .routes import router

__all__ = ["router"]
