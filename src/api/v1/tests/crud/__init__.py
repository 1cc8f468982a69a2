# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/tests/crud/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для тестов.
"""

from .create import router as create_router
from .delete import router as delete_router
from .read import router as read_router

__all__ = ["create_router", "delete_router", "read_router"]
