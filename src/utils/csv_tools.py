# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/utils/csv_tools.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Чтение и запись CSV файлов банка слов.

Формат: строка заголовка ``english,japanese,category,difficulty``,
кодировка UTF-8 (BOM допускается). Колонки category и difficulty
необязательны.
"""

import csv
from io import StringIO
from typing import Dict, Iterable, List, Optional

from src.utils.exceptions import ValidationError

CSV_COLUMNS = ["english", "japanese", "category", "difficulty"]
REQUIRED_COLUMNS = {"english", "japanese"}


def parse_words_csv(content: bytes) -> List[Dict[str, Optional[str]]]:
    """
    Разобрать загруженный CSV в список строк импорта.

    Args:
        content: Содержимое файла

    Returns:
        Список словарей с ключами english, japanese, category, difficulty

    Raises:
        ValidationError: Если файл не в UTF-8 или нет обязательных колонок
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ValidationError("CSV файл должен быть в кодировке UTF-8")

    reader = csv.DictReader(StringIO(text))
    header = {
        (name or "").strip().lower() for name in (reader.fieldnames or [])
    }
    missing = REQUIRED_COLUMNS - header
    if missing:
        raise ValidationError(
            f"В CSV отсутствуют обязательные колонки: {', '.join(sorted(missing))}"
        )

    rows = []
    for record in reader:
        # Лишние значения без заголовка DictReader кладет списком под ключ None
        normalized = {
            key.strip().lower(): value
            for key, value in record.items()
            if key is not None and isinstance(value, str)
        }
        if not any(value.strip() for value in normalized.values()):
            continue  # пустая строка
        rows.append(
            {
                column: (normalized.get(column) or "").strip() or None
                for column in CSV_COLUMNS
            }
        )
    return rows


def words_to_csv(rows: Iterable) -> str:
    """
    Записать слова в CSV в формате импорта.

    Args:
        rows: Строки ``(Word, category_name)``

    Returns:
        Текст CSV
    """
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_COLUMNS)
    for word, category_name in rows:
        writer.writerow([word.english, word.japanese, category_name or "", word.difficulty])

    content = output.getvalue()
    output.close()
    return content
