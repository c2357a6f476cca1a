"""Domain exceptions for neo-authz."""

from .base import NeoAuthzError


class ConfigurationError(NeoAuthzError):
    """Raised when library configuration is invalid."""
    pass


class AuthorizationError(NeoAuthzError):
    """Base exception for authorization errors."""
    pass


class RoleCatalogError(AuthorizationError):
    """Raised by role data providers when the role catalog cannot be read."""
    pass


class InvalidSchemaError(RoleCatalogError):
    """Raised when a role provider is pointed at a schema it must not read."""
    pass
