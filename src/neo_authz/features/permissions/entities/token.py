"""Permission token value objects.

A permission token is a colon-delimited string of the canonical shape
``app:domain:resource[:scope]:action``. Single-segment (``read``) and
two-segment (``domain:action``) shapes are also legal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class PermissionScope(str, Enum):
    """Access breadth qualifier, declared from narrowest to broadest."""

    OWN = "own"
    TEAM = "team"
    ORG = "org"
    TENANT = "tenant"
    GLOBAL = "global"

    @property
    def rank(self) -> int:
        """Position in the scope ordering (own=0 ... global=4)."""
        return _SCOPE_ORDER.index(self)

    @classmethod
    def rank_of(cls, value: Optional[str]) -> Optional[int]:
        """Rank of a raw scope string, or None if it is not a known scope."""
        if value is None:
            return None
        try:
            return cls(value).rank
        except ValueError:
            return None


_SCOPE_ORDER: Tuple[PermissionScope, ...] = tuple(PermissionScope)


@dataclass(frozen=True)
class PermissionToken:
    """Immutable parsed permission token.

    Which optional fields are populated depends only on the segment count:

    ====  =============================================
    1     short
    2     domain, action
    3     app, domain, action
    4     app, domain, resource, action
    5+    app, domain, resource, scope, action
    ====  =============================================
    """

    original: str
    app: Optional[str] = None
    domain: Optional[str] = None
    resource: Optional[str] = None
    scope: Optional[str] = None
    action: Optional[str] = None
    short: Optional[str] = None

    @property
    def is_short_form(self) -> bool:
        """Check if this is a namespace-agnostic single-segment token."""
        return self.short is not None

    @property
    def segment_count(self) -> int:
        return len([s for s in self.original.split(":") if s])

    @property
    def scope_rank(self) -> Optional[int]:
        return PermissionScope.rank_of(self.scope)

    def namespace(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        """Get the (app, domain, resource) namespace segments."""
        return self.app, self.domain, self.resource

    def __str__(self) -> str:
        return self.original
