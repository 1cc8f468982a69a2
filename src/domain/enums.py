# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/domain/enums.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена словарных тестов.

Этот модуль содержит все определения перечислений, используемые в приложении:
типы тестов и направления вопросов.
"""

import enum


class TestType(str, enum.Enum):
    """Объявленный тип теста."""

    ENGLISH_TO_JAPANESE = "english_to_japanese"
    JAPANESE_TO_ENGLISH = "japanese_to_english"
    MIXED = "mixed"  # Раскрывается в чередование типов при создании


class QuestionType(str, enum.Enum):
    """Направление конкретного вопроса теста (никогда не mixed)."""

    ENGLISH_TO_JAPANESE = "english_to_japanese"  # Показываем английское слово
    JAPANESE_TO_ENGLISH = "japanese_to_english"  # Показываем японское слово
