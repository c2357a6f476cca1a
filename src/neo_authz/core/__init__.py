"""Core building blocks shared by neo-authz features."""

from .exceptions import (
    NeoAuthzError,
    ConfigurationError,
    AuthorizationError,
    RoleCatalogError,
    InvalidSchemaError,
)

__all__ = [
    "NeoAuthzError",
    "ConfigurationError",
    "AuthorizationError",
    "RoleCatalogError",
    "InvalidSchemaError",
]
