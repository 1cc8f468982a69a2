# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Маршруты банка слов.
"""

from .routes import router

__all__ = ["router"]
