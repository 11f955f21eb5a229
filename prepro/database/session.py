"""
Создание engine и фабрики сессий SQLAlchemy
"""

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from prepro.core.config import Config


logger = logging.getLogger(__name__)


def create_session_factory(
    database_url: str | None = None, echo: bool = False
) -> tuple[Engine, sessionmaker[Session]]:
    """
    Создание engine и фабрики сессий

    Args:
        database_url: URL базы данных (по умолчанию Config.DATABASE_URL)
        echo: Логировать SQL

    Returns:
        (engine, фабрика сессий)
    """
    database_url = database_url or Config.DATABASE_URL
    is_sqlite = database_url.startswith("sqlite")

    engine = create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Проверка соединения перед использованием
        connect_args={"check_same_thread": False} if is_sqlite else {},
    )
    session_factory = sessionmaker(engine, class_=Session, expire_on_commit=False)

    logger.info("Подключено к базе данных: %s", engine.url.render_as_string(hide_password=True))
    return engine, session_factory
