"""Authorization feature: the facade composing permissions and roles."""

from .services import AuthorizationService

__all__ = ["AuthorizationService"]
