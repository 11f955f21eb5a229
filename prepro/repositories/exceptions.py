"""
Исключения для работы с репозиториями
"""

from typing import Any


class RepositoryError(Exception):
    """Базовое исключение для репозиториев"""


class EntityNotFoundError(RepositoryError):
    """
    Исключение при отсутствии записи
    """

    def __init__(self, entity_type: str, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} #{entity_id} not found")
