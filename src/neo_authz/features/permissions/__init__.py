"""Permissions feature for neo-authz.

- entities/: permission tokens, scopes, action tables, legacy aliases and
  grant decisions
- services/: pure parsing and grant matching
"""

from .entities import (
    PermissionToken,
    PermissionScope,
    Action,
    LEGACY_PERMISSION_ALIASES,
    GrantDecision,
    GrantReason,
)
from .services import normalize, parse, grants, evaluate_grant

__all__ = [
    "PermissionToken",
    "PermissionScope",
    "Action",
    "LEGACY_PERMISSION_ALIASES",
    "GrantDecision",
    "GrantReason",
    "normalize",
    "parse",
    "grants",
    "evaluate_grant",
]
