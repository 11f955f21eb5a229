"""
Контексты вызова Presenter и Processor
"""

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class RequestContext:
    """Контекст отображения: актор, view context и опции вызова"""

    actor: Any
    view_context: Any
    options: dict[str, Any] = field(default_factory=dict)

    def for_record(self) -> "RequestContext":
        """Отдельная копия контекста для очередной записи коллекции"""
        return replace(self, options=dict(self.options))


@dataclass(frozen=True)
class ProcessorContext:
    """Контекст записи: атрибуты, актор и опции вызова"""

    attributes: dict[str, Any]
    actor: Any
    options: dict[str, Any] = field(default_factory=dict)
