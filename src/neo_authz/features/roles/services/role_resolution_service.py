"""Role resolution service.

Maps between stored role names and canonical (normalized) role names, and
answers hierarchy queries. Every comparison is made on normalized names.
Unresolvable names never raise; they log a warning and fall back.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ....config.constants import DefaultRoles
from ..entities.hierarchy import RoleHierarchy
from ..entities.role import RoleRecord, normalize_role_name
from ..repositories.role_catalog_cache import RoleCatalogCache

logger = logging.getLogger(__name__)


class RoleResolutionService:
    """Resolves role names against the cached role catalog."""

    def __init__(
        self,
        catalog: RoleCatalogCache,
        hierarchy: Optional[RoleHierarchy] = None,
        default_role: str = DefaultRoles.USER,
    ):
        self.catalog = catalog
        self.hierarchy = hierarchy or RoleHierarchy()
        self.default_role = default_role

    # Name mapping

    async def map_database_role_to_canonical(
        self,
        raw_name: Optional[str],
        fallback: Optional[str] = None,
    ) -> str:
        """Map a stored role name to its canonical name.

        Args:
            raw_name: Role name as stored or supplied by a caller
            fallback: Returned when the role is unknown (defaults to the
                service's default role)

        Returns:
            The normalized name if the role exists, otherwise ``fallback``
        """
        fallback = self.default_role if fallback is None else fallback
        normalized = normalize_role_name(raw_name)
        if not normalized:
            return fallback

        record = await self.catalog.get_role(normalized)
        if record is not None:
            return normalized

        logger.warning(f"Role {raw_name!r} not found in role catalog, using default: {fallback}")
        return fallback

    async def map_canonical_to_database_role(self, canonical_name: str) -> str:
        """Map a canonical role name back to the stored display name."""
        record = await self.catalog.get_role(canonical_name)
        if record is not None:
            return record.name

        logger.warning(f"Role {canonical_name!r} not found in role catalog, using as-is")
        return canonical_name

    @staticmethod
    def canonical_role_name(raw_name: Optional[str], fallback: str = DefaultRoles.USER) -> str:
        """Normalize a role name without consulting the catalog."""
        return normalize_role_name(raw_name) or fallback

    @staticmethod
    def canonical_names_from_records(records: Iterable[RoleRecord]) -> List[str]:
        """De-duplicated canonical names of ``records`` in first-seen order."""
        names: List[str] = []
        seen = set()
        for record in records:
            normalized = record.normalized_name
            if normalized not in seen:
                names.append(normalized)
                seen.add(normalized)
        return names

    # Catalog queries

    async def find_role_by_name(self, raw_name: Optional[str]) -> Optional[RoleRecord]:
        return await self.catalog.get_role(raw_name)

    async def is_valid_role(self, raw_name: Optional[str]) -> bool:
        return await self.catalog.get_role(raw_name) is not None

    async def list_valid_roles(self) -> List[str]:
        """Canonical names of every cached role, first-seen order."""
        roles = await self.catalog.get_roles_cached()
        return self.canonical_names_from_records(roles)

    async def group_role_names(self) -> Dict[str, List[str]]:
        """Group stored role names by the canonical name they map to."""
        groups: Dict[str, List[str]] = {}
        for record in await self.catalog.get_roles_cached():
            groups.setdefault(record.normalized_name, []).append(record.name)
        return groups

    @staticmethod
    def is_role_of_type(raw_name: Optional[str], target_role: Optional[str]) -> bool:
        """Check if ``raw_name`` normalizes to the canonical ``target_role``."""
        normalized = normalize_role_name(raw_name)
        return bool(normalized) and normalized == normalize_role_name(target_role)

    async def is_platform_role(self, raw_name: Optional[str]) -> bool:
        """Check the stored flags: system role with no owning tenant."""
        record = await self.catalog.get_role(raw_name)
        if record is None:
            return False
        return record.is_platform_role

    # Hierarchy

    def role_outranks(self, role_a: Optional[str], role_b: Optional[str]) -> bool:
        """Check if ``role_a`` has strictly more authority than ``role_b``."""
        return self.hierarchy.outranks(role_a, role_b)

    def manageable_roles(self, role_name: Optional[str]) -> List[str]:
        """Ranked roles that ``role_name`` may administer, highest first."""
        return self.hierarchy.outranked_by(role_name)

    def invalidate(self) -> None:
        self.catalog.invalidate()
