"""
Repository layer - источник записей для Presenter и Processor
"""

from prepro.repositories.base import PROTECTED_ATTRIBUTES, RecordProvider, SQLAlchemyRepository
from prepro.repositories.exceptions import EntityNotFoundError, RepositoryError


__all__ = [
    "PROTECTED_ATTRIBUTES",
    "EntityNotFoundError",
    "RecordProvider",
    "RepositoryError",
    "SQLAlchemyRepository",
]
