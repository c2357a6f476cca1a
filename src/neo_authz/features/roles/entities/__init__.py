"""Role entities and protocols."""

from .role import RoleRecord, normalize_role_name
from .protocols import RoleDataProvider
from .hierarchy import RoleHierarchy

__all__ = [
    "RoleRecord",
    "normalize_role_name",
    "RoleDataProvider",
    "RoleHierarchy",
]
