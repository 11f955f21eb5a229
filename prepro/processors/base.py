"""
Processor - создание, изменение и удаление записей

Каждая операция: получение записи -> проверка прав -> хуки ->
массовое назначение -> сохранение -> (запись, флаг успеха).
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from prepro.core.constants import PermissionAction
from prepro.domain.access_policy import check_permission, enforce_permissions
from prepro.domain.context import ProcessorContext
from prepro.repositories.base import RecordProvider
from prepro.repositories.exceptions import EntityNotFoundError
from prepro.utils.helpers import coerce_id


logger = logging.getLogger(__name__)

Hook = Callable[[Any, ProcessorContext], None]


@dataclass(frozen=True)
class ProcessorHooks:
    """
    Точки расширения Processor

    Хуки вызываются в фиксированном порядке после проверки прав:
    before_assign_on_* перед массовым назначением, before_save_on_* перед
    сохранением. Незаданный хук ничего не делает.
    """

    before_assign_on_create: Hook | None = None
    before_save_on_create: Hook | None = None
    before_assign_on_update: Hook | None = None
    before_save_on_update: Hook | None = None


class Processor:
    """Базовый Processor"""

    hooks: ProcessorHooks = ProcessorHooks()

    def __init__(self, repository: RecordProvider, hooks: ProcessorHooks | None = None):
        """
        Инициализация

        Args:
            repository: Источник записей (Record Provider)
            hooks: Хуки (по умолчанию - атрибут класса hooks)
        """
        self.repository = repository
        if hooks is not None:
            self.hooks = hooks

    @property
    def model_class(self) -> type:
        return self.repository.model_class

    def create(
        self,
        attributes: Mapping[str, Any],
        actor: Any,
        *,
        role: str | None = None,
        **options: Any,
    ) -> tuple[Any, bool]:
        """
        Создание новой записи

        Args:
            attributes: Атрибуты новой записи
            actor: Актор, который создаёт запись
            role: Роль массового назначения
            **options: Опции, доступные хукам

        Returns:
            (запись, флаг успеха)

        Raises:
            AuthorizationError: если у актора нет прав на создание
        """
        context = ProcessorContext(
            attributes=dict(attributes), actor=actor, options={"role": role, **options}
        )
        record = self.repository.build()
        self._authorize(record, PermissionAction.CREATE, actor)

        self._run_hook("before_assign_on_create", record, context)
        self.repository.assign(record, context.attributes, role=role)
        self._run_hook("before_save_on_create", record, context)

        success = self.repository.save(record)
        self._log_result("создана", record, actor, success)
        return record, success

    def update(
        self,
        attributes: Mapping[str, Any],
        actor: Any,
        *,
        role: str | None = None,
        **options: Any,
    ) -> tuple[Any, bool]:
        """
        Изменение существующей записи

        Args:
            attributes: Атрибуты записи, включая её "id"
            actor: Актор, который изменяет запись
            role: Роль массового назначения
            **options: Опции, доступные хукам

        Returns:
            (запись, флаг успеха)

        Raises:
            EntityNotFoundError: если записи нет или "id" не передан
            AuthorizationError: если у актора нет прав на изменение
        """
        if attributes.get("id") is None:
            raise EntityNotFoundError(self.model_class.__name__, None)

        context = ProcessorContext(
            attributes=dict(attributes), actor=actor, options={"role": role, **options}
        )
        record = self.repository.find(coerce_id(attributes["id"]))
        self._authorize(record, PermissionAction.UPDATE, actor)

        self._run_hook("before_assign_on_update", record, context)
        self.repository.assign(record, context.attributes, role=role)
        self._run_hook("before_save_on_update", record, context)

        success = self.repository.save(record)
        self._log_result("изменена", record, actor, success)
        return record, success

    def destroy(self, record_id: Any, actor: Any, **options: Any) -> tuple[Any, bool]:
        """
        Удаление записи

        Args:
            record_id: ID записи
            actor: Актор, который удаляет запись

        Returns:
            (удалённая запись, True)

        Raises:
            EntityNotFoundError: если записи нет
            AuthorizationError: если у актора нет прав на удаление
        """
        record = self.repository.find(coerce_id(record_id))
        self._authorize(record, PermissionAction.DESTROY, actor)
        self.repository.destroy(record)
        logger.info("%s #%s удалена актором %r", self.model_class.__name__, record_id, actor)
        return record, True

    def _authorize(self, record: Any, action: str, actor: Any) -> None:
        enforce_permissions(
            check_permission(record, action, actor),
            action=action,
            record=record,
            actor=actor,
        )
        logger.debug("%s: доступ на %s разрешён для %r", type(record).__name__, action, actor)

    def _run_hook(self, name: str, record: Any, context: ProcessorContext) -> None:
        hook = getattr(self.hooks, name)
        if hook is not None:
            hook(record, context)

    def _log_result(self, action: str, record: Any, actor: Any, success: bool) -> None:
        entity_type = type(record).__name__
        if success:
            logger.info(
                "%s #%s %s актором %r", entity_type, getattr(record, "id", None), action, actor
            )
        else:
            logger.warning(
                "%s не %s: %s", entity_type, action, "; ".join(getattr(record, "errors", None) or [])
            )
