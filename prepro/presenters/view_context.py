"""
View context - примитивы отображения, которые вызывают хелперы форматирования
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from prepro.utils.helpers import escape_html, get_now


MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_QUARTER_YEAR = 131400
MINUTES_IN_THREE_QUARTERS_YEAR = 394200
MINUTES_IN_YEAR = 525600


class ViewContext(Protocol):
    """Интерфейс view context для DecoratorMixin"""

    def time_ago_in_words(self, value: datetime) -> str: ...

    def content_tag(self, name: str, content: Any, **attrs: Any) -> str: ...


def distance_of_time_in_words(from_time: datetime, to_time: datetime) -> str:
    """
    Расстояние между двумя моментами словами

    Args:
        from_time: Начальный момент
        to_time: Конечный момент (порядок аргументов не важен)

    Returns:
        Строка вида "3 days", "about 1 hour", "over 2 years"
    """
    distance_in_seconds = round(abs((to_time - from_time).total_seconds()))
    distance_in_minutes = round(distance_in_seconds / 60)

    if distance_in_minutes <= 1:
        return "less than a minute" if distance_in_minutes == 0 else "1 minute"
    if distance_in_minutes < 45:
        return f"{distance_in_minutes} minutes"
    if distance_in_minutes < 90:
        return "about 1 hour"
    if distance_in_minutes < MINUTES_IN_DAY:
        return f"about {round(distance_in_minutes / 60)} hours"
    if distance_in_minutes < 2520:
        return "1 day"
    if distance_in_minutes < MINUTES_IN_MONTH:
        return f"{round(distance_in_minutes / MINUTES_IN_DAY)} days"
    if distance_in_minutes < 86400:
        months = round(distance_in_minutes / MINUTES_IN_MONTH)
        return "about 1 month" if months == 1 else f"about {months} months"
    if distance_in_minutes < MINUTES_IN_YEAR:
        return f"{round(distance_in_minutes / MINUTES_IN_MONTH)} months"

    # Больше года: учитываем остаток внутри текущего года
    years = distance_in_minutes // MINUTES_IN_YEAR
    remainder = distance_in_minutes % MINUTES_IN_YEAR
    if remainder < MINUTES_IN_QUARTER_YEAR:
        return "about 1 year" if years == 1 else f"about {years} years"
    if remainder < MINUTES_IN_THREE_QUARTERS_YEAR:
        return "over 1 year" if years == 1 else f"over {years} years"
    return f"almost {years + 1} years"


class HtmlViewContext:
    """View context по умолчанию: текстовые интервалы и HTML-теги"""

    def __init__(self, now: Callable[[], datetime] | None = None):
        """
        Инициализация

        Args:
            now: Функция текущего времени (по умолчанию get_now)
        """
        self._now = now or get_now

    def time_ago_in_words(self, value: datetime) -> str:
        """Интервал между value и текущим моментом словами"""
        now = self._now()
        if value.tzinfo is None and now.tzinfo is not None:
            now = now.replace(tzinfo=None)
        elif value.tzinfo is not None and now.tzinfo is None:
            value = value.replace(tzinfo=None)
        return distance_of_time_in_words(value, now)

    def content_tag(self, name: str, content: Any, **attrs: Any) -> str:
        """
        HTML-тег с экранированным содержимым

        Args:
            name: Имя тега
            content: Содержимое
            **attrs: Атрибуты (class_ -> class, None пропускается)

        Returns:
            Строка с тегом
        """
        rendered_attrs = "".join(
            f' {key.rstrip("_")}="{escape_html(value)}"'
            for key, value in attrs.items()
            if value is not None
        )
        return f"<{name}{rendered_attrs}>{escape_html(content)}</{name}>"
