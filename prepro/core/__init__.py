"""Ядро библиотеки - конфигурация и константы"""

from prepro.core.config import Config
from prepro.core.constants import DATETIME_FORMATS, DisplayText, OutputFormat, PermissionAction


__all__ = [
    "DATETIME_FORMATS",
    "Config",
    "DisplayText",
    "OutputFormat",
    "PermissionAction",
]
