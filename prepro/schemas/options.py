"""Pydantic схемы опций хелперов форматирования"""
from pydantic import BaseModel, ConfigDict, Field

from prepro.core.constants import DisplayText


class TimeInWordsOptions(BaseModel):
    """Общие опции интервала словами"""

    model_config = ConfigDict(extra="forbid")

    suppress_1: bool = Field(
        default=False,
        description="Убрать ведущую единицу: 'in the last month' вместо 'in the last 1 month'",
    )
    text_only: bool = Field(
        default=False,
        description="Вернуть текст без HTML-тега",
    )


class TimeAgoOptions(TimeInWordsOptions):
    """Опции для времени в прошлом"""

    suffix: str = Field(default=DisplayText.AGO_SUFFIX, description="Текст после интервала")


class TimeFromNowOptions(TimeInWordsOptions):
    """Опции для времени в будущем"""

    prefix: str = Field(default=DisplayText.FROM_NOW_PREFIX, description="Текст перед интервалом")
