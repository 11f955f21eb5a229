"""
Record Provider: протокол хранилища записей и его реализация на SQLAlchemy
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import Select, inspect
from sqlalchemy.exc import IntegrityError as DBIntegrityError
from sqlalchemy.orm import Session

from prepro.repositories.exceptions import EntityNotFoundError, RepositoryError


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Ключи, которые никогда не назначаются массово
PROTECTED_ATTRIBUTES = frozenset({"id"})


class RecordProvider(Protocol[T]):
    """Операции хранилища, которые вызывают Presenter и Processor"""

    model_class: type[T]

    def find(self, record_id: Any) -> T: ...

    def build(self, payload: Mapping[str, Any] | None = None) -> T: ...

    def assign(self, record: T, payload: Mapping[str, Any], role: str | None = None) -> T: ...

    def save(self, record: T) -> bool: ...

    def destroy(self, record: T) -> None: ...

    def fetch_all(self, statement: Select) -> list[T]: ...


class SQLAlchemyRepository(Generic[T]):
    """
    Репозиторий записей одного типа поверх сессии SQLAlchemy

    Сохранение возвращает флаг успеха: ошибки валидации и целостности
    не выбрасываются, а записываются в record.errors.
    """

    def __init__(
        self,
        session: Session,
        model_class: type[T],
        schema: type[BaseModel] | None = None,
        accessible_attributes: Mapping[str | None, set[str]] | None = None,
    ):
        """
        Инициализация репозитория

        Args:
            session: Сессия SQLAlchemy
            model_class: Класс модели
            schema: Pydantic схема для валидации перед сохранением
            accessible_attributes: Разрешённые для массового назначения
                атрибуты по ролям (None - роль по умолчанию)
        """
        self.session = session
        self.model_class = model_class
        self.schema = schema
        self.accessible_attributes = accessible_attributes

    @property
    def entity_type(self) -> str:
        return self.model_class.__name__

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Контекстный менеджер для транзакций

        Yields:
            Session: Сессия БД
        """
        if self.session is None:
            raise RepositoryError("Сессия БД не задана")

        try:
            yield self.session
            self.session.commit()
            logger.debug("Транзакция успешно завершена (commit)")
        except Exception as e:
            self.session.rollback()
            logger.error("Транзакция отменена (rollback): %s", e)
            raise

    def find(self, record_id: Any) -> T:
        """
        Получение записи по ID

        Args:
            record_id: ID записи

        Returns:
            Запись

        Raises:
            EntityNotFoundError: если запись не найдена
        """
        record = None
        if record_id is not None:
            record = self.session.get(self.model_class, record_id)

        if record is None:
            raise EntityNotFoundError(self.entity_type, record_id)
        return record

    def build(self, payload: Mapping[str, Any] | None = None) -> T:
        """
        Создание новой (не сохранённой) записи

        Args:
            payload: Начальные атрибуты

        Returns:
            Новая запись
        """
        record = self.model_class()
        if payload:
            self.assign(record, payload)
        return record

    def assign(self, record: T, payload: Mapping[str, Any], role: str | None = None) -> T:
        """
        Массовое назначение атрибутов с защитой

        Args:
            record: Запись
            payload: Атрибуты
            role: Роль назначения (ключ в accessible_attributes)

        Returns:
            Та же запись
        """
        allowed = self._assignable_attributes(role)
        skipped = []

        for key, value in payload.items():
            if key in allowed:
                setattr(record, key, value)
            elif key not in PROTECTED_ATTRIBUTES:
                skipped.append(key)

        if skipped:
            logger.warning(
                "%s: пропущены атрибуты при массовом назначении (role=%s): %s",
                self.entity_type,
                role,
                ", ".join(sorted(skipped)),
            )
        return record

    def save(self, record: T) -> bool:
        """
        Валидация и сохранение записи

        Args:
            record: Запись

        Returns:
            True если запись сохранена
        """
        errors = self.validate(record)
        if errors:
            record.errors = errors
            # Невалидные изменения не должны попасть в БД при следующем commit
            if record in self.session:
                self.session.expunge(record)
            logger.info("%s не прошла валидацию: %s", self.entity_type, "; ".join(errors))
            return False

        try:
            with self.transaction() as session:
                session.add(record)
        except DBIntegrityError as e:
            record.errors = [str(e.orig)]
            logger.warning("%s не сохранена: нарушение целостности: %s", self.entity_type, e.orig)
            return False

        record.errors = []
        return True

    def validate(self, record: T) -> list[str]:
        """
        Валидация записи через pydantic схему

        Returns:
            Список сообщений об ошибках (пустой - запись валидна)
        """
        if self.schema is None:
            return []

        try:
            self.schema.model_validate(record, from_attributes=True)
        except ValidationError as e:
            return [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
        return []

    def destroy(self, record: T) -> None:
        """Удаление записи"""
        with self.transaction() as session:
            session.delete(record)

    def fetch_all(self, statement: Select) -> list[T]:
        """
        Выполнение подготовленного запроса

        Args:
            statement: SELECT по модели репозитория

        Returns:
            Список записей
        """
        if not isinstance(statement, Select):
            raise RepositoryError(f"Ожидался Select, получено {type(statement).__name__}")
        return list(self.session.scalars(statement))

    def _assignable_attributes(self, role: str | None) -> set[str]:
        mapped = set(inspect(self.model_class).attrs.keys()) - PROTECTED_ATTRIBUTES
        if self.accessible_attributes is None:
            return mapped
        return mapped & set(self.accessible_attributes.get(role, set()))
