# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/management/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Операции управления категориями.
"""

from .stats import router as stats_router

__all__ = ["stats_router"]
