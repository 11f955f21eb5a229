"""Доменный слой: политика доступа и контексты вызова"""

from prepro.domain.access_policy import (
    AccessPolicy,
    AuthorizationError,
    check_permission,
    enforce_permissions,
)
from prepro.domain.context import ProcessorContext, RequestContext


__all__ = [
    "AccessPolicy",
    "AuthorizationError",
    "ProcessorContext",
    "RequestContext",
    "check_permission",
    "enforce_permissions",
]
