"""
prepro - Presenter и Processor поверх SQLAlchemy моделей

Presenter готовит записи к отображению (чтение), Processor создаёт,
изменяет и удаляет их (запись). Оба проверяют права актора через
предикаты, которые реализует сама модель.
"""

from prepro.database import Base, RecordMixin, create_session_factory
from prepro.domain import AccessPolicy, AuthorizationError, ProcessorContext, RequestContext
from prepro.presenters import DecoratorMixin, HtmlViewContext, Presenter
from prepro.processors import Processor, ProcessorHooks
from prepro.repositories import EntityNotFoundError, RepositoryError, SQLAlchemyRepository


__version__ = "0.1.0"

__all__ = [
    "AccessPolicy",
    "AuthorizationError",
    "Base",
    "DecoratorMixin",
    "EntityNotFoundError",
    "HtmlViewContext",
    "Presenter",
    "Processor",
    "ProcessorContext",
    "ProcessorHooks",
    "RecordMixin",
    "RepositoryError",
    "RequestContext",
    "SQLAlchemyRepository",
    "create_session_factory",
]
