# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/categories/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Основной роутер для всех операций с категориями.
"""

from fastapi import APIRouter

from .crud import create as crud_create
from .crud import delete as crud_delete
from .crud import read as crud_read
from .crud import update as crud_update
from .management import stats as management_stats

router = APIRouter()

router.include_router(management_stats.router, prefix="/categories")

# Добавление маршрутов CRUD операций
router.include_router(crud_create.router, prefix="/categories")
router.include_router(crud_read.router, prefix="/categories")
router.include_router(crud_update.router, prefix="/categories")
router.include_router(crud_delete.router, prefix="/categories")
