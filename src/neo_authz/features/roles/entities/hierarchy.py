"""Fixed role hierarchy for "may role A administer role B" queries."""

from typing import List, Mapping, Optional

from ....config.constants import ROLE_HIERARCHY_LEVELS, UNRANKED_ROLE_LEVEL
from .role import normalize_role_name


class RoleHierarchy:
    """Ranks canonical role names; a higher level means more authority.

    Roles missing from the table have level 0 and never outrank anything.
    """

    def __init__(self, levels: Optional[Mapping[str, int]] = None):
        source = ROLE_HIERARCHY_LEVELS if levels is None else levels
        self._levels = {normalize_role_name(name): level for name, level in source.items()}

    @property
    def levels(self) -> Mapping[str, int]:
        return dict(self._levels)

    def level_of(self, role_name: Optional[str]) -> int:
        """Get the hierarchy level of a role name (normalized first)."""
        return self._levels.get(normalize_role_name(role_name), UNRANKED_ROLE_LEVEL)

    def outranks(self, role_a: Optional[str], role_b: Optional[str]) -> bool:
        """Check if ``role_a`` has strictly more authority than ``role_b``."""
        level_a = self.level_of(role_a)
        if level_a == UNRANKED_ROLE_LEVEL:
            return False
        return level_a > self.level_of(role_b)

    def outranked_by(self, role_name: Optional[str]) -> List[str]:
        """All ranked roles that ``role_name`` strictly outranks, highest first."""
        return [
            name
            for name, _ in sorted(self._levels.items(), key=lambda item: (-item[1], item[0]))
            if self.outranks(role_name, name)
        ]

    def __repr__(self) -> str:
        return f"RoleHierarchy({self._levels})"
