"""
Database package: базовые классы моделей и фабрика сессий SQLAlchemy
"""

from prepro.database.base import Base, RecordMixin
from prepro.database.session import create_session_factory


__all__ = ["Base", "RecordMixin", "create_session_factory"]
