"""
Тесты для SQLAlchemyRepository
"""

import pytest
from sqlalchemy import select

from prepro.repositories import EntityNotFoundError, RepositoryError, SQLAlchemyRepository
from tests.models import Article


class TestFind:
    """Тесты поиска записей"""

    def test_find_existing(self, article_repository, saved_article):
        """Тест получения записи по ID"""
        assert article_repository.find(saved_article.id) is saved_article

    def test_find_missing(self, article_repository):
        """Тест: отсутствующая запись -> EntityNotFoundError"""
        with pytest.raises(EntityNotFoundError) as exc_info:
            article_repository.find(999)

        assert exc_info.value.entity_type == "Article"
        assert exc_info.value.entity_id == 999
        assert str(exc_info.value) == "Article #999 not found"

    def test_find_none(self, article_repository):
        with pytest.raises(EntityNotFoundError):
            article_repository.find(None)


class TestAssign:
    """Тесты массового назначения"""

    def test_build_with_payload(self, article_repository):
        """Тест создания новой записи с атрибутами"""
        article = article_repository.build({"title": "Fresh", "body": "Text"})

        assert article.title == "Fresh"
        assert article.body == "Text"
        assert article.id is None

    def test_id_and_unknown_keys_are_skipped(self, article_repository, caplog):
        """Тест: id и неизвестные ключи не назначаются"""
        article = Article()

        article_repository.assign(article, {"id": 77, "title": "T", "is_admin": True})

        assert article.id is None
        assert article.title == "T"
        assert not hasattr(article, "is_admin")
        assert "is_admin" in caplog.text

    def test_accessible_attributes_by_role(self, session):
        """Тест: разрешённые атрибуты зависят от роли"""
        repository = SQLAlchemyRepository(
            session,
            Article,
            accessible_attributes={
                None: {"title", "body"},
                "admin": {"title", "body", "published"},
            },
        )
        article = Article()

        repository.assign(article, {"title": "T", "published": True})
        assert article.title == "T"
        assert article.published is None

        repository.assign(article, {"published": True}, role="admin")
        assert article.published is True

    def test_unknown_role_assigns_nothing(self, session):
        repository = SQLAlchemyRepository(
            session, Article, accessible_attributes={None: {"title"}}
        )
        article = Article()

        repository.assign(article, {"title": "T"}, role="guest")

        assert article.title is None


class TestSave:
    """Тесты сохранения"""

    def test_save_valid(self, article_repository, session):
        """Тест успешного сохранения"""
        article = article_repository.build({"title": "Saved"})

        assert article_repository.save(article) is True
        assert article.id is not None
        assert article.errors == []
        assert session.get(Article, article.id).title == "Saved"

    def test_save_invalid(self, article_repository, session):
        """Тест: ошибка валидации -> False и ошибки в записи"""
        article = article_repository.build({"title": ""})

        assert article_repository.save(article) is False
        assert article.id is None
        assert article.errors and article.errors[0].startswith("title:")
        assert session.scalars(select(Article)).all() == []

    def test_save_invalid_stored_record_is_not_flushed_later(
        self, article_repository, saved_article, session
    ):
        """Тест: невалидные изменения не попадают в БД при следующем сохранении"""
        saved_article.title = ""

        assert article_repository.save(saved_article) is False
        assert saved_article.title == ""
        assert saved_article not in session

        other = article_repository.build({"title": "Other", "slug": "other"})
        assert article_repository.save(other) is True

        assert session.get(Article, saved_article.id).title == "Original"

    def test_save_integrity_error(self, article_repository, saved_article):
        """Тест: нарушение уникальности -> False, без исключения"""
        duplicate = article_repository.build({"title": "Copy", "slug": saved_article.slug})

        assert article_repository.save(duplicate) is False
        assert any("UNIQUE" in error for error in duplicate.errors)

    def test_save_without_schema(self, session):
        repository = SQLAlchemyRepository(session, Article)
        article = repository.build({})

        assert repository.save(article) is True


class TestDestroyAndFetch:
    """Тесты удаления и выборки"""

    def test_destroy(self, article_repository, saved_article, session):
        """Тест удаления записи"""
        article_id = saved_article.id

        article_repository.destroy(saved_article)

        assert session.get(Article, article_id) is None

    def test_fetch_all(self, article_repository, session):
        """Тест выполнения подготовленного запроса"""
        session.add_all([Article(title="B", published=True), Article(title="A", published=False)])
        session.commit()

        result = article_repository.fetch_all(
            select(Article).where(Article.published.is_(True))
        )

        assert [a.title for a in result] == ["B"]

    def test_fetch_all_requires_select(self, article_repository):
        with pytest.raises(RepositoryError):
            article_repository.fetch_all("SELECT * FROM articles")

    def test_transaction_rollback(self, article_repository, session):
        """Тест: ошибка внутри транзакции откатывает изменения"""
        with pytest.raises(RuntimeError), article_repository.transaction():
            session.add(Article(title="Lost"))
            session.flush()
            raise RuntimeError("boom")

        assert session.scalars(select(Article)).all() == []
