# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/words/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Основной роутер для всех операций со словами.
Объединяет маршруты для CRUD операций и управления банком слов.
"""

from fastapi import APIRouter

from .crud import create as crud_create
from .crud import delete as crud_delete
from .crud import read as crud_read
from .crud import update as crud_update
from .management import bulk as management_bulk
from .management import export as management_export
from .management import imports as management_imports
from .management import range as management_range

router = APIRouter()

# Маршруты управления регистрируются раньше "/{word_id}"
router.include_router(management_export.router, prefix="/words")
router.include_router(management_range.router, prefix="/words")
router.include_router(management_imports.router, prefix="/words")
router.include_router(management_bulk.router, prefix="/words")

# Добавление маршрутов CRUD операций
router.include_router(crud_create.router, prefix="/words")
router.include_router(crud_read.router, prefix="/words")
router.include_router(crud_update.router, prefix="/words")
router.include_router(crud_delete.router, prefix="/words")
