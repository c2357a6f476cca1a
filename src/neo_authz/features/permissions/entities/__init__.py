"""Permission token entities and fixed matching tables."""

from .token import PermissionToken, PermissionScope
from .actions import (
    Action,
    SHORT_FORM_SATISFIERS,
    ACTION_SYNONYMS,
    ACTION_IMPLICATIONS,
    short_form_satisfiers,
    synonyms_of,
    implied_by,
)
from .aliases import LEGACY_PERMISSION_ALIASES
from .decision import GrantDecision, GrantReason

__all__ = [
    "PermissionToken",
    "PermissionScope",
    "Action",
    "SHORT_FORM_SATISFIERS",
    "ACTION_SYNONYMS",
    "ACTION_IMPLICATIONS",
    "short_form_satisfiers",
    "synonyms_of",
    "implied_by",
    "LEGACY_PERMISSION_ALIASES",
    "GrantDecision",
    "GrantReason",
]
