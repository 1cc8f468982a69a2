# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for generic CRUD functionality.

This module provides reusable asynchronous CRUD helpers using SQLAlchemy 2.0
async ORM, with logging and basic validation. It is designed to be stateless
for unit testing simplicity.
"""

from __future__ import annotations

from typing import Any, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.logger import configure_logger
from src.domain.models import Base
from src.utils.exceptions import NotFoundError

T = TypeVar("T", bound=Base)

logger = configure_logger()

# Человекочитаемые названия сущностей для сообщений об ошибках
RESOURCE_NAMES = {
    "Category": "Категория",
    "Word": "Слово",
    "Test": "Тест",
}

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


def resource_name(model: Type[Base]) -> str:
    return RESOURCE_NAMES.get(model.__name__, model.__name__)


async def get_item(session: AsyncSession, model: Type[T], item_id: int) -> T:
    """Retrieve a single item by ID or raise NotFoundError."""
    item = await session.get(model, item_id)
    if item is None:
        raise NotFoundError(resource_type=resource_name(model), resource_id=item_id)
    return item


async def item_exists(session: AsyncSession, model: Type[Base], item_id: int) -> bool:
    """Check whether an item with the given ID exists."""
    result = await session.execute(
        select(func.count()).select_from(model).where(getattr(model, "id") == item_id)
    )
    return result.scalar_one() > 0


async def count_items(session: AsyncSession, model: Type[Base]) -> int:
    """Count all rows of the given model."""
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def create_item(session: AsyncSession, model: Type[T], **kwargs: Any) -> T:
    """Create a new item in the database."""
    instance = model(**kwargs)
    session.add(instance)
    try:
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    await session.refresh(instance)
    logger.debug(f"Created {model.__name__} with ID {instance.id}")
    return instance


async def update_item(
    session: AsyncSession, model: Type[T], item_id: int, **kwargs: Any
) -> T:
    """Update an existing item in the database."""
    instance = await get_item(session, model, item_id)
    for key, value in kwargs.items():
        setattr(instance, key, value)
    try:
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    await session.refresh(instance)
    logger.debug(f"Updated {model.__name__} with ID {item_id}: {sorted(kwargs)}")
    return instance
