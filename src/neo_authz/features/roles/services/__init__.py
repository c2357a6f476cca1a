"""Role resolution services."""

from .role_resolution_service import RoleResolutionService

__all__ = ["RoleResolutionService"]
