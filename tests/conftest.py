"""Pytest configuration and fixtures for neo-authz tests."""

import pytest

from neo_authz.features.roles.entities.role import RoleRecord
from neo_authz.features.roles.repositories.role_catalog_cache import RoleCatalogCache
from neo_authz.features.roles.repositories.static_role_provider import StaticRoleProvider
from neo_authz.features.roles.services.role_resolution_service import RoleResolutionService
from neo_authz.features.authorization.services.authorization_service import AuthorizationService


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingProvider(StaticRoleProvider):
    """Static provider that records how often it was asked."""

    def __init__(self, records=()):
        super().__init__(records)
        self.calls = 0

    async def fetch_all_roles(self):
        self.calls += 1
        return await super().fetch_all_roles()


@pytest.fixture
def sample_roles():
    """Role catalog mirroring a typical deployment."""
    return [
        RoleRecord(name="Super_Admin", is_system_role=True, tenant_id=None, id="1"),
        RoleRecord(name="Admin", is_system_role=True, tenant_id="tenant-1", id="2"),
        RoleRecord(name="Manager", is_system_role=False, tenant_id="tenant-1", id="3"),
        RoleRecord(name=" Engineer ", is_system_role=False, tenant_id="tenant-1", id="4"),
        RoleRecord(name="agent", is_system_role=False, tenant_id="tenant-1", id="5"),
        RoleRecord(name="Customer", is_system_role=False, tenant_id="tenant-1", id="6"),
        RoleRecord(name="Auditor", is_system_role=True, tenant_id=None, id="7"),
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def provider(sample_roles):
    return CountingProvider(sample_roles)


@pytest.fixture
def catalog(provider, clock):
    return RoleCatalogCache(provider, ttl_seconds=300, clock=clock)


@pytest.fixture
def role_resolution(catalog):
    return RoleResolutionService(catalog)


@pytest.fixture
def authorization_service(role_resolution):
    return AuthorizationService(role_resolution)
