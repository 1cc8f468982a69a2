# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
SQLAlchemy ORM модели банка слов и словарных тестов.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import (CheckConstraint, DateTime, Enum, ForeignKey, Integer,
                        MetaData, String, Text, UniqueConstraint, func)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from src.domain.enums import QuestionType, TestType

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Category(Base):
    """Категория слов. Категория с id=1 - категория по умолчанию."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    words: Mapped[List["Word"]] = relationship(back_populates="category")


class Word(Base):
    """Слово банка: английский и японский варианты."""

    __tablename__ = "words"
    __table_args__ = (
        CheckConstraint("difficulty BETWEEN 1 AND 5", name="difficulty_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    english: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    japanese: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"), nullable=False, default=1, index=True
    )
    difficulty: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # Сколько раз слово попадало в сохранённые тесты
    frequency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    category: Mapped["Category"] = relationship(back_populates="words")


class Test(Base):
    """Собранный словарный тест. Неизменяем после создания."""

    __tablename__ = "tests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    test_type: Mapped[TestType] = mapped_column(
        Enum(TestType, name="test_type", values_callable=_enum_values),
        nullable=False,
    )
    question_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    items: Mapped[List["TestItem"]] = relationship(
        back_populates="test",
        order_by="TestItem.question_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    category: Mapped[Optional["Category"]] = relationship()


class TestItem(Base):
    """Вопрос теста: слово, позиция (с 1) и направление."""

    __tablename__ = "test_items"
    __table_args__ = (
        UniqueConstraint("test_id", "question_order", name="uq_test_items_order"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    test_id: Mapped[int] = mapped_column(
        ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    word_id: Mapped[int] = mapped_column(
        ForeignKey("words.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    question_order: Mapped[int] = mapped_column(Integer, nullable=False)
    question_type: Mapped[QuestionType] = mapped_column(
        Enum(QuestionType, name="question_type", values_callable=_enum_values),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    test: Mapped["Test"] = relationship(back_populates="items")
    word: Mapped["Word"] = relationship()


class TestHistory(Base):
    """Журнал использования тестов (только добавление)."""

    __tablename__ = "test_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    test_id: Mapped[int] = mapped_column(
        ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    used_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
