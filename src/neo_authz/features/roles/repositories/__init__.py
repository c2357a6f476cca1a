"""Role catalog cache and role data providers."""

from .role_catalog_cache import RoleCatalogCache, CatalogSnapshot
from .static_role_provider import StaticRoleProvider
from .asyncpg_role_provider import AsyncPGRoleProvider

__all__ = [
    "RoleCatalogCache",
    "CatalogSnapshot",
    "StaticRoleProvider",
    "AsyncPGRoleProvider",
]
