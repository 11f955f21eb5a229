"""
Pytest fixtures и конфигурация для тестов
"""
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy.orm import Session


# Добавляем корневую директорию в PYTHONPATH
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

from prepro.core.config import Config
from prepro.database import Base, create_session_factory
from prepro.presenters import HtmlViewContext
from prepro.repositories import SQLAlchemyRepository
from tests.models import Actor, Article, ArticleSchema, Role


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """
    Фикстура для тестовой базы данных (in-memory)
    """
    engine, session_factory = create_session_factory("sqlite://")
    Base.metadata.create_all(engine)
    db_session = session_factory()
    yield db_session
    db_session.close()
    engine.dispose()


@pytest.fixture
def article_repository(session: Session) -> SQLAlchemyRepository[Article]:
    """
    Фикстура для репозитория статей с валидацией
    """
    return SQLAlchemyRepository(session, Article, schema=ArticleSchema)


@pytest.fixture
def view_context() -> HtmlViewContext:
    return HtmlViewContext()


@pytest.fixture
def admin() -> Actor:
    return Actor(id=1, roles=frozenset({Role.ADMIN}))


@pytest.fixture
def editor() -> Actor:
    return Actor(id=2, roles=frozenset({Role.EDITOR}))


@pytest.fixture
def reader() -> Actor:
    return Actor(id=3, roles=frozenset({Role.READER}))


@pytest.fixture
def saved_article(session: Session, editor: Actor) -> Article:
    """
    Сохранённая неопубликованная статья редактора
    """
    article = Article(title="Original", slug="original", author_id=editor.id)
    session.add(article)
    session.commit()
    return article


@pytest.fixture
def mock_config(monkeypatch) -> None:
    """
    Фикстура для замены конфигурации на тестовую
    """
    monkeypatch.setattr(Config, "ENFORCE_PERMISSIONS", True)
    monkeypatch.setattr(Config, "DATABASE_URL", "sqlite://")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "NA_TEXT", "N/A")
