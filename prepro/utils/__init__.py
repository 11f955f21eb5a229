"""Утилиты и вспомогательные функции"""
from prepro.utils.helpers import (
    coerce_id,
    escape_html,
    format_datetime,
    get_now,
    is_blank,
    is_record_id,
)
from prepro.utils.logging_config import setup_logging


__all__ = [
    # ID utilities
    "coerce_id",
    "is_record_id",
    # Format utilities
    "escape_html",
    "format_datetime",
    "is_blank",
    # DateTime utilities
    "get_now",
    # Logging
    "setup_logging",
]
