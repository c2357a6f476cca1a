"""Authorization facade services."""

from .authorization_service import AuthorizationService

__all__ = ["AuthorizationService"]
