"""
Вспомогательные функции
"""

import re
from datetime import datetime
from html import escape
from typing import Any

from prepro.core.constants import DATETIME_FORMATS


# Строка-идентификатор: начинается с цифр ("12", "12-slug")
RECORD_ID_PATTERN = re.compile(r"\A\d+")


def get_now() -> datetime:
    """
    Получить текущее время в локальном часовом поясе

    Returns:
        datetime объект с timezone
    """
    return datetime.now().astimezone()


def format_datetime(dt: datetime, output_format: str = "full_date_and_time") -> str:
    """
    Форматирование даты и времени

    Args:
        dt: Объект datetime
        output_format: Имя формата из DATETIME_FORMATS или strftime-шаблон

    Returns:
        Строка с датой и временем
    """
    return dt.strftime(DATETIME_FORMATS.get(output_format, output_format))


def escape_html(text: Any) -> str:
    """
    Экранирование специальных символов для HTML

    Args:
        text: Исходное значение

    Returns:
        Экранированный текст безопасный для HTML
    """
    if text is None:
        return ""
    return escape(str(text))


def is_blank(value: Any) -> bool:
    """Пустое значение: None, пустая строка/коллекция или строка из пробелов"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


def is_record_id(value: Any) -> bool:
    """Похоже ли значение на ID записи (целое число или строка с цифрами в начале)"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and RECORD_ID_PATTERN.match(value) is not None


def coerce_id(value: Any) -> Any:
    """
    Приведение ID к целому числу

    Args:
        value: ID в виде числа или строки

    Returns:
        int для числовых ID, иначе значение без изменений
    """
    if isinstance(value, str):
        match = RECORD_ID_PATTERN.match(value)
        if match:
            return int(match.group())
    return value
