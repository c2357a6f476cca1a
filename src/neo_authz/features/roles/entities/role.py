"""Role record entity.

Roles are created, renamed and deleted by an external administrative
process; this library only ever reads them.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def normalize_role_name(name: Optional[str]) -> str:
    """Normalize a role name for comparison (lowercase, trimmed)."""
    if not isinstance(name, str):
        return ""
    return name.strip().lower()


@dataclass(frozen=True)
class RoleRecord:
    """A named role as stored by the backing system."""

    name: str
    is_system_role: bool = False
    tenant_id: Optional[str] = None
    id: Optional[str] = None
    description: Optional[str] = None

    @property
    def normalized_name(self) -> str:
        return normalize_role_name(self.name)

    @property
    def is_platform_role(self) -> bool:
        """Platform roles are system roles that no tenant owns."""
        return self.is_system_role is True and self.tenant_id is None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RoleRecord":
        """Build a record from a database row or API payload.

        Accepts both snake_case and camelCase flag names.
        """
        is_system = data.get("is_system_role", data.get("isSystemRole", False))
        tenant_id = data.get("tenant_id", data.get("tenantId"))
        role_id = data.get("id")
        return cls(
            name=data["name"],
            is_system_role=bool(is_system),
            tenant_id=str(tenant_id) if tenant_id is not None else None,
            id=str(role_id) if role_id is not None else None,
            description=data.get("description"),
        )

    def __str__(self) -> str:
        return f"Role({self.name})"
