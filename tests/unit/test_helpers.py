"""
Тесты для вспомогательных функций
"""
from datetime import datetime

import pytest

from prepro.utils.helpers import coerce_id, escape_html, format_datetime, is_blank, is_record_id


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5, True),
        ("12", True),
        ("12-my-article", True),
        ("abc", False),
        ("", False),
        (True, False),  # bool - не ID
        (None, False),
        ({"id": 1}, False),
    ],
)
def test_is_record_id(value, expected):
    """Тест распознавания ID записи."""
    assert is_record_id(value) is expected


def test_coerce_id():
    """Тест приведения ID к числу."""
    assert coerce_id("42") == 42
    assert coerce_id("42-slug") == 42
    assert coerce_id(7) == 7
    assert coerce_id("uuid-like") == "uuid-like"


def test_is_blank():
    """Тест проверки пустых значений."""
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("  ")
    assert is_blank([])
    assert not is_blank("text")
    assert not is_blank(0)
    assert not is_blank(datetime(2025, 1, 1))


def test_format_datetime():
    """Тест форматирования даты."""
    value = datetime(2025, 3, 9, 8, 5)
    assert format_datetime(value) == "09.03.2025 08:05"
    assert format_datetime(value, "db") == "2025-03-09 08:05:00"
    assert format_datetime(value, "%H-%M") == "08-05"


def test_escape_html():
    """Тест экранирования HTML."""
    assert escape_html(None) == ""
    assert escape_html("<a & b>") == "&lt;a &amp; b&gt;"
    assert escape_html(5) == "5"
