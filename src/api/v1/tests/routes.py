# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/tests/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Основной роутер для всех операций с тестами.
"""

from fastapi import APIRouter

from .crud import create as crud_create
from .crud import delete as crud_delete
from .crud import read as crud_read
from .management import history as management_history
from .management import preview as management_preview

router = APIRouter()

router.include_router(management_preview.router, prefix="/tests")
router.include_router(management_history.router, prefix="/tests")

# Добавление маршрутов CRUD операций
router.include_router(crud_create.router, prefix="/tests")
router.include_router(crud_read.router, prefix="/tests")
router.include_router(crud_delete.router, prefix="/tests")
