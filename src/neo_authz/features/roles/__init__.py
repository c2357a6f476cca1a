"""Roles feature for neo-authz.

- entities/: role records, the role data provider protocol and the fixed
  role hierarchy
- repositories/: the TTL role catalog cache and role data providers
- services/: role name resolution and hierarchy queries
"""

from .entities import RoleRecord, normalize_role_name, RoleDataProvider, RoleHierarchy
from .repositories import RoleCatalogCache, CatalogSnapshot, StaticRoleProvider, AsyncPGRoleProvider
from .services import RoleResolutionService

__all__ = [
    "RoleRecord",
    "normalize_role_name",
    "RoleDataProvider",
    "RoleHierarchy",
    "RoleCatalogCache",
    "CatalogSnapshot",
    "StaticRoleProvider",
    "AsyncPGRoleProvider",
    "RoleResolutionService",
]
