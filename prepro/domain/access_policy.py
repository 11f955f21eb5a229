"""
Политика доступа - предикаты прав на записях и единая точка проверки
"""

import logging
from typing import Any, Protocol, runtime_checkable

from prepro.core.constants import PermissionAction


logger = logging.getLogger(__name__)


class AuthorizationError(Exception):
    """Исключение при отсутствии прав у актора на действие"""

    def __init__(
        self,
        action: str | None = None,
        entity_type: str | None = None,
        actor: Any = None,
    ):
        self.action = action
        self.entity_type = entity_type
        self.actor = actor
        message = "Access denied"
        if action:
            message += f": {action}"
        if entity_type:
            message += f" {entity_type}"
        super().__init__(message)


@runtime_checkable
class AccessPolicy(Protocol):
    """
    Набор предикатов прав, который реализует каждый тип записи

    listable_by вызывается на классе записи, остальные - на экземпляре.
    """

    @classmethod
    def listable_by(cls, actor: Any) -> bool: ...

    def viewable_by(self, actor: Any) -> bool: ...

    def creatable_by(self, actor: Any) -> bool: ...

    def updatable_by(self, actor: Any) -> bool: ...

    def destroyable_by(self, actor: Any) -> bool: ...


def check_permission(target: Any, action: str, actor: Any) -> bool:
    """
    Вызов предиката права для действия

    Args:
        target: Запись (или класс записи для LIST)
        action: Действие из PermissionAction
        actor: Актор

    Returns:
        Результат предиката
    """
    predicate = getattr(target, PermissionAction.get_predicate_name(action))
    return bool(predicate(actor))


def enforce_permissions(
    has_permission: bool,
    *,
    action: str | None = None,
    record: Any = None,
    actor: Any = None,
) -> None:
    """
    Выбрасывает AuthorizationError, если у актора нет прав

    Args:
        has_permission: Результат проверки прав
        action: Действие (для сообщения об ошибке)
        record: Запись или класс записи
        actor: Актор

    Raises:
        AuthorizationError: если has_permission ложно
    """
    if has_permission:
        return

    entity_type = None
    if record is not None:
        entity_type = record.__name__ if isinstance(record, type) else type(record).__name__

    logger.warning("Доступ запрещен: action=%s, entity=%s, actor=%r", action, entity_type, actor)
    raise AuthorizationError(action=action, entity_type=entity_type, actor=actor)
