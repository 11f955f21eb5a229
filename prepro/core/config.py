"""
Конфигурация библиотеки из переменных окружения (.env поддерживается)
"""

import logging
import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    """Чтение булевой переменной окружения"""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Настройки библиотеки"""

    # Проверка прав в Presenter по умолчанию
    ENFORCE_PERMISSIONS: bool = _get_bool("PREPRO_ENFORCE_PERMISSIONS", True)

    # База данных для create_session_factory()
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///prepro.db")

    # Логирование
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    # Текст при ошибке форматирования
    NA_TEXT: str = os.getenv("PREPRO_NA_TEXT", "N/A")

    @classmethod
    def validate(cls) -> bool:
        """
        Проверка конфигурации

        Returns:
            True если конфигурация корректна

        Raises:
            ValueError: при некорректных значениях
        """
        if not cls.DATABASE_URL:
            raise ValueError("DATABASE_URL не установлен")

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            raise ValueError(f"Недопустимый LOG_LEVEL: {cls.LOG_LEVEL}")

        return True
