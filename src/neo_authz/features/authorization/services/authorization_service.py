"""Authorization facade.

The single entry point callers use: "does this held permission set grant
the requested permission?" and "may this role administer that role?".
Super-admin bypasses are the caller's concern and are not applied here.
"""

import logging
from typing import Iterable, List, Mapping, Optional

from ....config.settings import AuthzSettings, get_settings
from ...permissions.entities.aliases import LEGACY_PERMISSION_ALIASES
from ...permissions.entities.decision import GrantDecision
from ...permissions.services.grant_matcher import evaluate_grant, grants
from ...roles.entities.hierarchy import RoleHierarchy
from ...roles.entities.protocols import RoleDataProvider
from ...roles.repositories.role_catalog_cache import RoleCatalogCache
from ...roles.services.role_resolution_service import RoleResolutionService

logger = logging.getLogger(__name__)

# Resolution fallback for unknown role names; ranks below every role.
_UNRESOLVED_ROLE = ""


class AuthorizationService:
    """Composes grant matching with role resolution."""

    def __init__(
        self,
        role_resolution: RoleResolutionService,
        *,
        aliases: Mapping[str, str] = LEGACY_PERMISSION_ALIASES,
    ):
        self.role_resolution = role_resolution
        self.aliases = aliases

    @classmethod
    def from_provider(
        cls,
        provider: RoleDataProvider,
        settings: Optional[AuthzSettings] = None,
        hierarchy: Optional[RoleHierarchy] = None,
        **cache_options
    ) -> "AuthorizationService":
        """Wire a role catalog cache and resolution service around ``provider``."""
        settings = settings or get_settings()
        catalog = RoleCatalogCache(
            provider,
            ttl_seconds=settings.role_cache_ttl_seconds,
            **cache_options
        )
        resolution = RoleResolutionService(
            catalog,
            hierarchy=hierarchy,
            default_role=settings.default_role,
        )
        return cls(resolution)

    # Permission checks

    def is_granted(self, held_permissions: Iterable[str], requested: str) -> bool:
        """Check if any held permission grants ``requested``."""
        return any(grants(held, requested, self.aliases) for held in held_permissions)

    def is_granted_any(self, held_permissions: Iterable[str], requested: Iterable[str]) -> bool:
        """Check if at least one of ``requested`` is granted."""
        held = list(held_permissions)
        return any(self.is_granted(held, permission) for permission in requested)

    def is_granted_all(self, held_permissions: Iterable[str], requested: Iterable[str]) -> bool:
        """Check if every one of ``requested`` is granted."""
        held = list(held_permissions)
        return all(self.is_granted(held, permission) for permission in requested)

    def explain(self, held_permissions: Iterable[str], requested: str) -> List[GrantDecision]:
        """Evaluate ``requested`` against every held permission, for audit logs."""
        decisions = [evaluate_grant(held, requested, self.aliases) for held in held_permissions]
        for decision in decisions:
            logger.debug(str(decision))
        return decisions

    # Role administration

    async def can_manage_role(self, acting_role: str, target_role: str) -> bool:
        """Check if ``acting_role`` strictly outranks ``target_role``.

        Raises:
            TypeError: If either role name is not a string
        """
        if not isinstance(acting_role, str) or not isinstance(target_role, str):
            raise TypeError("can_manage_role expects role names as strings")

        acting = await self.role_resolution.map_database_role_to_canonical(acting_role, _UNRESOLVED_ROLE)
        target = await self.role_resolution.map_database_role_to_canonical(target_role, _UNRESOLVED_ROLE)
        return self.role_resolution.role_outranks(acting, target)

    async def manageable_roles(self, acting_role: str) -> List[str]:
        """Catalog roles that ``acting_role`` may administer, highest first."""
        acting = await self.role_resolution.map_database_role_to_canonical(acting_role, _UNRESOLVED_ROLE)
        valid = set(await self.role_resolution.list_valid_roles())
        return [name for name in self.role_resolution.manageable_roles(acting) if name in valid]

    def invalidate_role_cache(self) -> None:
        """Call after any external role create/rename/delete."""
        self.role_resolution.invalidate()
