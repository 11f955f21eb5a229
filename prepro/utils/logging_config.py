"""
Настройка логирования для логгера "prepro"

- Всегда пишем в stdout
- Если задан файл, дополнительно пишем в него с ротацией
- Если нет прав на запись в файл, остаёмся только с консолью
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from prepro.core.config import Config


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Настройка логгера библиотеки

    Args:
        level: Уровень логирования (по умолчанию Config.LOG_LEVEL)
        log_file: Путь к файлу логов (по умолчанию Config.LOG_FILE)

    Returns:
        Настроенный логгер "prepro"
    """
    log_formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    handlers: list[logging.Handler] = [console_handler]

    log_file = log_file if log_file is not None else Config.LOG_FILE
    if log_file:
        log_file_path = Path(log_file)
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                str(log_file_path),
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(log_formatter)
            handlers.insert(0, file_handler)  # файл первым, затем консоль
        except (PermissionError, OSError) as e:
            sys.stderr.write(f"[logging] WARNING: cannot use file logging at {log_file_path}: {e}\n")

    log_level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger("prepro")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(log_level)

    # SQLAlchemy шумит на DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return logger
