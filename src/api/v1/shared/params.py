# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/shared/params.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие ограничения для идентификаторов и счетчиков во входных данных.
"""

from typing import Annotated

from fastapi import Path
from pydantic import Field

# Верхняя граница колонок Integer (ID, позиции) в PostgreSQL
MAX_DB_INTEGER = 2**31 - 1

EntityId = Annotated[int, Field(ge=1, le=MAX_DB_INTEGER)]
IdPath = Annotated[int, Path(ge=1, le=MAX_DB_INTEGER)]
