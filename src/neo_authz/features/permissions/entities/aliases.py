"""Legacy permission aliases.

Exact-string rewrites from spellings used by older releases to their
canonical tokens. Keys are written after hyphen rewriting. Canonical values
must never appear as keys and must never contain hyphens.
"""

from types import MappingProxyType
from typing import Final, Mapping


LEGACY_PERMISSION_ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    # Dashboards and analytics
    "dashboard:view": "crm:dashboard:panel:view",
    "dashboard:read": "crm:dashboard:panel:view",
    "analytics:view": "crm:analytics:insight:view",

    # Customers
    "customers:read": "crm:customer:record:read",
    "customers:create": "crm:customer:record:create",
    "customers:update": "crm:customer:record:update",
    "customers:delete": "crm:customer:record:delete",
    "manage_customers": "crm:customer:record:manage",

    # Sales
    "sales:read": "crm:sales:deal:read",
    "sales:create": "crm:sales:deal:create",
    "sales:update": "crm:sales:deal:update",
    "sales:delete": "crm:sales:deal:delete",
    "manage_sales": "crm:sales:deal:manage",

    # Contracts
    "contracts:read": "crm:contract:record:read",
    "contracts:update": "crm:contract:record:update",
    "manage_contracts": "crm:contract:record:manage",
    "service_contracts:read": "crm:contract:service:read",
    "manage_service_contracts": "crm:contract:service:manage",

    # Support
    "tickets:read": "crm:support:ticket:read",
    "tickets:update": "crm:support:ticket:update",
    "manage_tickets": "crm:support:ticket:manage",
    "complaints:read": "crm:support:complaint:read",
    "manage_complaints": "crm:support:complaint:manage",

    # Catalog and reference data
    "products:read": "crm:product:record:read",
    "manage_products": "crm:product:record:manage",
    "companies:read": "crm:company:record:read",
    "manage_companies": "crm:company:record:manage",
    "masters:read": "crm:reference:data:read",

    # Administration
    "users:read": "crm:user:record:read",
    "manage_users": "crm:user:record:manage",
    "roles:read": "crm:role:record:read",
    "manage_roles": "crm:role:record:manage",
    "settings:read": "crm:system:config:read",
    "manage_settings": "crm:system:config:manage",
    "audit:export": "crm:audit:log:export",

    # Platform
    "platform_admin": "crm:platform:control:admin",
    "super_admin": "crm:platform:control:admin",
    "manage_tenants": "crm:platform:tenant:manage",
    "system_monitoring": "crm:platform:audit:view",
})
