"""
DecoratorMixin - хелперы форматирования для записей, подготовленных Presenter'ом

Хелперы используют RequestContext, прикреплённый к записи, поэтому
актор и view context не нужно передавать в каждый вызов.
"""

import logging
import re
from datetime import date, datetime, time
from typing import Any

from prepro.core.config import Config
from prepro.core.constants import DisplayText, OutputFormat
from prepro.domain.context import RequestContext
from prepro.schemas.options import TimeAgoOptions, TimeFromNowOptions, TimeInWordsOptions
from prepro.utils.helpers import format_datetime, get_now, is_blank


logger = logging.getLogger(__name__)

LEADING_ONE_PATTERN = re.compile(r"^1\s+")


class DecoratorMixin:
    """Mixin для моделей, которые отображает Presenter"""

    @property
    def presenter_attrs(self) -> RequestContext | None:
        return getattr(self, "_presenter_attrs", None)

    @presenter_attrs.setter
    def presenter_attrs(self, context: RequestContext | None) -> None:
        self._presenter_attrs = context

    @property
    def view_context(self) -> Any:
        context = self.presenter_attrs
        return context.view_context if context is not None else None

    def formatted_datetime(
        self, value: datetime | None, output_format: str, **options: Any
    ) -> str:
        """
        Форматирование даты

        Args:
            value: Дата (None/пустое значение -> "N/A")
            output_format: "distance_in_words" или имя формата из DATETIME_FORMATS
            **options: Опции для интервала словами

        Returns:
            Отформатированная дата
        """
        if is_blank(value):
            return Config.NA_TEXT

        if output_format != OutputFormat.DISTANCE_IN_WORDS:
            return format_datetime(value, output_format)

        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime.combine(value, time.min)

        try:
            now = get_now()
            if value.tzinfo is None:
                now = now.replace(tzinfo=None)
            in_past = value < now
        except (AttributeError, TypeError) as e:
            logger.debug("Не удалось сравнить %r с текущим временем: %s", value, e)
            return Config.NA_TEXT

        if in_past:
            # в прошлом
            return self.decorated_time_ago_in_words(value, **options)
        # в будущем
        return self.decorated_time_from_now_in_words(value, **options)

    def decorated_time_ago_in_words(self, value: datetime, **options: Any) -> str:
        """
        Время в прошлом словами, абсолютное время - в подсказке

        Args:
            value: Дата
            **options: suffix (по умолчанию " ago"), suppress_1, text_only

        Returns:
            Текст или <span title="...">текст</span>
        """
        opts = TimeAgoOptions(**options)
        try:
            words = self._time_in_words(value) + opts.suffix
        except Exception as e:
            logger.debug("Не удалось вычислить интервал для %r: %s", value, e)
            words = Config.NA_TEXT
        return self._render_time_in_words(value, words, opts)

    def decorated_time_from_now_in_words(self, value: datetime, **options: Any) -> str:
        """
        Время в будущем словами, абсолютное время - в подсказке

        Args:
            value: Дата
            **options: prefix (по умолчанию "in "), suppress_1, text_only

        Returns:
            Текст или <span title="...">текст</span>
        """
        opts = TimeFromNowOptions(**options)
        try:
            words = opts.prefix + self._time_in_words(value)
        except Exception as e:
            logger.debug("Не удалось вычислить интервал для %r: %s", value, e)
            words = Config.NA_TEXT
        return self._render_time_in_words(value, words, opts)

    def formatted_boolean(self, value: Any) -> str:
        return DisplayText.YES if value else DisplayText.NO

    def indicate_blank(self) -> str:
        """Метка для незаполненного значения"""
        view_context = self.view_context
        if view_context is None:
            return DisplayText.NONE_GIVEN
        return view_context.content_tag(
            "span", DisplayText.NONE_GIVEN, class_=DisplayText.BLANK_LABEL_CLASS
        )

    def _time_in_words(self, value: datetime) -> str:
        return self.view_context.time_ago_in_words(value).replace("about ", "")

    def _render_time_in_words(
        self, value: datetime, words: str, opts: TimeInWordsOptions
    ) -> str:
        if opts.suppress_1:
            words = LEADING_ONE_PATTERN.sub("", words)

        view_context = self.view_context
        if opts.text_only or view_context is None:
            return words

        try:
            title = format_datetime(value, OutputFormat.FULL_DATE_AND_TIME)
        except (AttributeError, TypeError, ValueError):
            title = None
        return view_context.content_tag("span", words, title=title)
