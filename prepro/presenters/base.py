"""
Presenter - подготовка записей к отображению

Используется для доступа только на чтение: списки, просмотр, формы
создания и редактирования. Перед отображением проверяются права актора.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import Select

from prepro.core.config import Config
from prepro.core.constants import PermissionAction
from prepro.domain.access_policy import check_permission, enforce_permissions
from prepro.domain.context import RequestContext
from prepro.presenters.decorator import DecoratorMixin
from prepro.repositories.base import RecordProvider
from prepro.utils.helpers import coerce_id, is_record_id


logger = logging.getLogger(__name__)


class Presenter:
    """
    Базовый Presenter

    Класс записи берётся из репозитория, переданного в конструктор.
    Наследники могут переопределить make_presentable, чтобы добавить
    к записи данные для отображения.
    """

    def __init__(self, repository: RecordProvider):
        """
        Инициализация

        Args:
            repository: Источник записей (Record Provider)
        """
        self.repository = repository

    @property
    def model_class(self) -> type:
        return self.repository.model_class

    def present(
        self,
        target: Any,
        actor: Any,
        view_context: Any,
        *,
        enforce_permissions: bool | None = None,
        **options: Any,
    ) -> Any:
        """
        Подготовка записи или коллекции записей к отображению

        Args:
            target: ID записи, атрибуты новой записи, запись,
                список записей или SQLAlchemy Select
            actor: Актор, который будет просматривать записи
            view_context: View context для хелперов форматирования
            enforce_permissions: Проверять права (по умолчанию Config.ENFORCE_PERMISSIONS)
            **options: Дополнительные опции, доступные через presenter_attrs

        Returns:
            Подготовленная запись или список записей

        Raises:
            AuthorizationError: если у актора нет прав
        """
        if enforce_permissions is None:
            enforce_permissions = Config.ENFORCE_PERMISSIONS
        options = {"enforce_permissions": enforce_permissions, **options}

        if isinstance(target, (list, tuple, Select)):
            return self.present_collection(target, actor, view_context, options)
        return self.present_single(target, actor, view_context, options)

    def present_collection(
        self,
        records: Sequence[Any] | Select,
        actor: Any,
        view_context: Any,
        options: dict[str, Any] | None = None,
    ) -> list[Any]:
        """
        Подготовка коллекции записей

        Args:
            records: Список записей или Select по модели
            actor: Актор
            view_context: View context
            options: Опции вызова

        Returns:
            Список подготовленных записей
        """
        options = options or {}
        context = RequestContext(actor=actor, view_context=view_context, options=options)

        if options.get("enforce_permissions", True):
            enforce_permissions(
                check_permission(self.model_class, PermissionAction.LIST, actor),
                action=PermissionAction.LIST,
                record=self.model_class,
                actor=actor,
            )

        if isinstance(records, Select):
            records = self.repository.fetch_all(records)

        presented = [self.make_presentable(record, context.for_record()) for record in records]
        logger.debug("%s: подготовлено записей: %d", type(self).__name__, len(presented))
        return presented

    def present_single(
        self,
        target: Any,
        actor: Any,
        view_context: Any,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """
        Подготовка одной записи

        Args:
            target: ID, атрибуты новой записи или запись
            actor: Актор
            view_context: View context
            options: Опции вызова

        Returns:
            Подготовленная запись
        """
        options = options or {}
        context = RequestContext(actor=actor, view_context=view_context, options=options)
        record = self.load_model_instance(target)

        if options.get("enforce_permissions", True):
            enforce_permissions(
                check_permission(record, PermissionAction.VIEW, actor),
                action=PermissionAction.VIEW,
                record=record,
                actor=actor,
            )

        return self.make_presentable(record, context)

    def load_model_instance(self, target: Any) -> Any:
        """
        Получение записи по target

        Args:
            target: ID (число или строка с цифрами), атрибуты или запись

        Returns:
            Найденная, новая или переданная запись
        """
        if is_record_id(target):
            return self.repository.find(coerce_id(target))
        if isinstance(target, Mapping):
            return self.repository.build(target)
        return target

    def make_presentable(self, record: Any, context: RequestContext) -> Any:
        """
        Прикрепление контекста к записи

        Args:
            record: Запись с DecoratorMixin
            context: Контекст отображения

        Returns:
            Та же запись
        """
        if not isinstance(record, DecoratorMixin):
            raise TypeError(
                f"{type(record).__name__} не поддерживает отображение: нужен DecoratorMixin"
            )
        record.presenter_attrs = context
        return record
