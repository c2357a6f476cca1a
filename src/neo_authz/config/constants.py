"""Constants and enums for neo-authz.

Fixed tables that are configuration rather than data: cache lifetimes,
schema names and the role hierarchy used for "may A manage B" queries.
"""

from types import MappingProxyType
from typing import Final, Mapping


class CacheTTL:
    """Cache TTL values in seconds."""

    ROLE_CATALOG: Final[int] = 300           # 5 minutes


class DatabaseSchemas:
    """Database schema names."""

    ADMIN: Final[str] = "admin"
    TENANT_PREFIX: Final[str] = "tenant_"


class DefaultRoles:
    """Canonical role names shipped with every deployment."""

    SUPER_ADMIN: Final[str] = "super_admin"
    ADMIN: Final[str] = "admin"
    MANAGER: Final[str] = "manager"
    ENGINEER: Final[str] = "engineer"
    AGENT: Final[str] = "agent"
    CUSTOMER: Final[str] = "customer"
    USER: Final[str] = "user"


# Higher level = more authority. Hard-coded on purpose; the role catalog
# itself is database driven but ranks are not stored per record.
ROLE_HIERARCHY_LEVELS: Final[Mapping[str, int]] = MappingProxyType({
    DefaultRoles.SUPER_ADMIN: 6,
    DefaultRoles.ADMIN: 5,
    DefaultRoles.MANAGER: 4,
    DefaultRoles.ENGINEER: 3,
    DefaultRoles.AGENT: 2,
    DefaultRoles.CUSTOMER: 1,
})

UNRANKED_ROLE_LEVEL: Final[int] = 0
