"""
Presenters - подготовка записей к отображению

Presenter проверяет права на чтение и прикрепляет к записям контекст,
через который DecoratorMixin форматирует даты, булевы и пустые значения.
"""

from prepro.presenters.base import Presenter
from prepro.presenters.decorator import DecoratorMixin
from prepro.presenters.view_context import HtmlViewContext, ViewContext, distance_of_time_in_words


__all__ = [
    "DecoratorMixin",
    "HtmlViewContext",
    "Presenter",
    "ViewContext",
    "distance_of_time_in_words",
]
