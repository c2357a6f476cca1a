"""Tests for the role catalog cache."""

import asyncio
import logging

import pytest
from unittest.mock import AsyncMock

from neo_authz.features.roles.entities.role import RoleRecord
from neo_authz.features.roles.repositories.role_catalog_cache import RoleCatalogCache
from neo_authz.core.exceptions import RoleCatalogError


class TestRoleCatalogCache:
    """Test TTL caching and invalidation."""

    @pytest.mark.asyncio
    async def test_first_read_fetches(self, catalog, provider, sample_roles):
        roles = await catalog.get_roles_cached()

        assert roles == sample_roles
        assert provider.calls == 1
        assert catalog.fetch_count == 1

    @pytest.mark.asyncio
    async def test_reads_within_ttl_use_cache(self, catalog, provider, clock):
        await catalog.get_roles_cached()
        clock.advance(299)
        await catalog.get_roles_cached()

        assert provider.calls == 1
        assert not catalog.is_stale

    @pytest.mark.asyncio
    async def test_read_after_ttl_refetches(self, catalog, provider, clock):
        await catalog.get_roles_cached()
        clock.advance(300)

        assert catalog.is_stale
        await catalog.get_roles_cached()

        assert provider.calls == 2

    @pytest.mark.asyncio
    async def test_invalidate_forces_refetch_within_ttl(self, catalog, provider, clock):
        await catalog.get_roles_cached()
        clock.advance(1)

        catalog.invalidate_role_cache()

        assert catalog.is_stale
        assert catalog.last_refresh is None
        await catalog.get_roles_cached()
        assert provider.calls == 2

    @pytest.mark.asyncio
    async def test_refetch_sees_new_roles(self, catalog, provider):
        await catalog.get_roles_cached()
        provider.replace([{"name": "Auditor", "is_system_role": False, "tenant_id": "t-9"}])
        catalog.invalidate()

        roles = await catalog.get_roles_cached()

        assert [role.name for role in roles] == ["Auditor"]

    @pytest.mark.asyncio
    async def test_lookup_is_normalized(self, catalog):
        role = await catalog.get_role("  ENGINEER")

        assert role is not None
        assert role.name == " Engineer "
        assert await catalog.get_role("") is None
        assert await catalog.get_role(None) is None

    @pytest.mark.asyncio
    async def test_duplicate_names_first_wins(self, clock):
        provider = AsyncMock()
        provider.fetch_all_roles.return_value = [
            RoleRecord(name="Admin", tenant_id="t-1"),
            RoleRecord(name="ADMIN", tenant_id="t-2"),
        ]
        catalog = RoleCatalogCache(provider, clock=clock)

        role = await catalog.get_role("admin")

        assert role.tenant_id == "t-1"
        assert len(await catalog.get_roles_cached()) == 2

    def test_ttl_must_be_positive(self, provider):
        with pytest.raises(ValueError):
            RoleCatalogCache(provider, ttl_seconds=0)


class TestRoleCatalogCacheFailures:
    """Test degradation on provider failure."""

    @pytest.mark.asyncio
    async def test_fetch_failure_returns_empty_list(self, clock, caplog):
        provider = AsyncMock()
        provider.fetch_all_roles.side_effect = RoleCatalogError("database unavailable")
        catalog = RoleCatalogCache(provider, clock=clock)

        with caplog.at_level(logging.ERROR):
            roles = await catalog.get_roles_cached()

        assert roles == []
        assert catalog.failure_count == 1
        assert "database unavailable" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_absorbed(self, clock):
        provider = AsyncMock()
        provider.fetch_all_roles.side_effect = RuntimeError("boom")
        catalog = RoleCatalogCache(provider, clock=clock)

        assert await catalog.get_roles_cached() == []
        assert await catalog.get_role("admin") is None

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self, clock, sample_roles):
        provider = AsyncMock()
        provider.fetch_all_roles.side_effect = [RuntimeError("boom"), sample_roles]
        catalog = RoleCatalogCache(provider, clock=clock)

        assert await catalog.get_roles_cached() == []
        assert await catalog.get_roles_cached() == sample_roles
        assert provider.fetch_all_roles.await_count == 2

    @pytest.mark.asyncio
    async def test_mapping_rows_are_accepted(self, clock):
        provider = AsyncMock()
        provider.fetch_all_roles.return_value = [
            {"name": "Admin", "isSystemRole": True, "tenantId": None},
            {"name": "Agent", "is_system_role": False, "tenant_id": 7},
        ]
        catalog = RoleCatalogCache(provider, clock=clock)

        roles = await catalog.get_roles_cached()

        assert [role.name for role in roles] == ["Admin", "Agent"]
        assert (await catalog.get_role("admin")).is_platform_role
        assert (await catalog.get_role("agent")).tenant_id == "7"
        assert catalog.failure_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("result", [None, [42], [{"isSystemRole": True}]])
    async def test_malformed_result_counts_as_failure(self, clock, result, caplog):
        provider = AsyncMock()
        provider.fetch_all_roles.return_value = result
        catalog = RoleCatalogCache(provider, clock=clock)

        with caplog.at_level(logging.ERROR):
            assert await catalog.get_roles_cached() == []

        assert await catalog.get_role("admin") is None
        assert catalog.failure_count == 2
        assert catalog.is_stale
        assert "Failed to fetch roles" in caplog.text


class TestRoleCatalogCacheConcurrency:
    """Test behaviour under concurrent callers."""

    @pytest.mark.asyncio
    async def test_concurrent_misses_fetch_once(self, clock, sample_roles):
        release = asyncio.Event()
        calls = 0

        class SlowProvider:
            async def fetch_all_roles(self):
                nonlocal calls
                calls += 1
                await release.wait()
                return sample_roles

        catalog = RoleCatalogCache(SlowProvider(), clock=clock)

        tasks = [asyncio.create_task(catalog.get_roles_cached()) for _ in range(10)]
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(*tasks)

        assert calls == 1
        assert all(result == sample_roles for result in results)

    @pytest.mark.asyncio
    async def test_invalidate_during_fetch_is_not_cached(self, clock, sample_roles):
        started = asyncio.Event()
        release = asyncio.Event()
        calls = 0

        class SlowProvider:
            async def fetch_all_roles(self):
                nonlocal calls
                calls += 1
                started.set()
                await release.wait()
                return sample_roles

        catalog = RoleCatalogCache(SlowProvider(), clock=clock)

        in_flight = asyncio.create_task(catalog.get_roles_cached())
        await started.wait()
        catalog.invalidate()
        release.set()

        # The in-flight read still answers with complete data
        assert await in_flight == sample_roles
        assert catalog.is_stale

        await catalog.get_roles_cached()
        assert calls == 2

    @pytest.mark.asyncio
    async def test_returned_list_is_a_copy(self, catalog, sample_roles):
        roles = await catalog.get_roles_cached()
        roles.clear()

        assert await catalog.get_roles_cached() == sample_roles

    @pytest.mark.asyncio
    async def test_concurrent_misses_during_outage_fetch_once(self, clock):
        release = asyncio.Event()
        calls = 0

        class FailingProvider:
            async def fetch_all_roles(self):
                nonlocal calls
                calls += 1
                await release.wait()
                raise ConnectionError("database unavailable")

        catalog = RoleCatalogCache(FailingProvider(), clock=clock)

        tasks = [asyncio.create_task(catalog.get_roles_cached()) for _ in range(20)]
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(*tasks)

        assert calls == 1
        assert all(result == [] for result in results)
        assert catalog.failure_count == 1

        # The next call after the outage tries again
        await catalog.get_roles_cached()
        assert calls == 2
