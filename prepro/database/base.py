"""
Базовые классы SQLAlchemy моделей
"""

from typing import Any

from sqlalchemy.orm import DeclarativeBase

from prepro.presenters.decorator import DecoratorMixin


# Базовый класс для всех моделей
class Base(DeclarativeBase):
    pass


class RecordMixin(DecoratorMixin):
    """
    Mixin записи: предикаты прав, ошибки сохранения и хелперы отображения

    Все предикаты по умолчанию запрещают доступ, конкретные модели
    переопределяют нужные.
    """

    @property
    def errors(self) -> list[str]:
        """Ошибки последнего сохранения"""
        return getattr(self, "_errors", None) or []

    @errors.setter
    def errors(self, value: list[str]) -> None:
        self._errors = list(value)

    @classmethod
    def listable_by(cls, actor: Any) -> bool:
        return False

    def viewable_by(self, actor: Any) -> bool:
        return False

    def creatable_by(self, actor: Any) -> bool:
        return False

    def updatable_by(self, actor: Any) -> bool:
        return False

    def destroyable_by(self, actor: Any) -> bool:
        return False
