"""Exception hierarchy for neo-authz."""

from .base import NeoAuthzError
from .domain import (
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
