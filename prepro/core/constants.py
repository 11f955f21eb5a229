"""
Константы библиотеки - действия доступа, форматы дат, тексты отображения
"""


class PermissionAction:
    """Действия, для которых проверяются права"""

    LIST = "list"  # Просмотр списка
    VIEW = "view"  # Просмотр записи
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"

    @classmethod
    def all_actions(cls) -> list[str]:
        """Список всех действий"""
        return [cls.LIST, cls.VIEW, cls.CREATE, cls.UPDATE, cls.DESTROY]

    @classmethod
    def get_predicate_name(cls, action: str) -> str:
        """Получение имени метода-предиката для действия"""
        predicates = {
            cls.LIST: "listable_by",
            cls.VIEW: "viewable_by",
            cls.CREATE: "creatable_by",
            cls.UPDATE: "updatable_by",
            cls.DESTROY: "destroyable_by",
        }
        return predicates.get(action, action)


class OutputFormat:
    """Специальные форматы вывода даты"""

    DISTANCE_IN_WORDS = "distance_in_words"
    FULL_DATE_AND_TIME = "full_date_and_time"


# Именованные форматы дат (аналог initializers в Rails)
DATETIME_FORMATS: dict[str, str] = {
    "full_date_and_time": "%d.%m.%Y %H:%M",
    "date": "%d.%m.%Y",
    "time": "%H:%M",
    "db": "%Y-%m-%d %H:%M:%S",
    "iso8601": "%Y-%m-%dT%H:%M:%S",
    "long": "%B %d, %Y %H:%M",
    "short": "%d %b %H:%M",
}


class DisplayText:
    """Тексты, которые выводят хелперы форматирования"""

    YES = "Yes"
    NO = "No"
    NONE_GIVEN = "None Given"
    BLANK_LABEL_CLASS = "label"
    AGO_SUFFIX = " ago"
    FROM_NOW_PREFIX = "in "
