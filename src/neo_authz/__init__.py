"""Neo-Authz - hierarchical permission authorization for NeoMultiTenant services.

Parses permission tokens, decides whether a held permission grants a
requested one, and resolves role names against a cached role catalog.
Logging is left to the application; call ``setup_logging()`` to use the
bundled configuration.
"""

from .__version__ import __version__

from .config import (
    AuthzSettings,
    get_settings,
    setup_logging,
    ROLE_HIERARCHY_LEVELS,
)

from .core.exceptions import (
    NeoAuthzError,
    ConfigurationError,
    AuthorizationError,
    RoleCatalogError,
    InvalidSchemaError,
)

from .features.permissions import (
    PermissionToken,
    PermissionScope,
    Action,
    LEGACY_PERMISSION_ALIASES,
    GrantDecision,
    GrantReason,
    normalize,
    parse,
    grants,
    evaluate_grant,
)

from .features.roles import (
    RoleRecord,
    RoleDataProvider,
    RoleHierarchy,
    RoleCatalogCache,
    StaticRoleProvider,
    AsyncPGRoleProvider,
    RoleResolutionService,
    normalize_role_name,
)

from .features.authorization import AuthorizationService

__all__ = [
    "__version__",
    # Configuration
    "AuthzSettings",
    "get_settings",
    "setup_logging",
    "ROLE_HIERARCHY_LEVELS",
    # Exceptions
    "NeoAuthzError",
    "ConfigurationError",
    "AuthorizationError",
    "RoleCatalogError",
    "InvalidSchemaError",
    # Permissions
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
    # Roles
    "RoleRecord",
    "RoleDataProvider",
    "RoleHierarchy",
    "RoleCatalogCache",
    "StaticRoleProvider",
    "AsyncPGRoleProvider",
    "RoleResolutionService",
    "normalize_role_name",
    # Authorization
    "AuthorizationService",
]
