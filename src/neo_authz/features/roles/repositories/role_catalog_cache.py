"""In-memory role catalog cache with TTL and explicit invalidation."""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from ....config.constants import CacheTTL
from ..entities.protocols import RoleDataProvider
from ..entities.role import RoleRecord, normalize_role_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogSnapshot:
    """One complete, immutable fetch of the role catalog."""

    records: Tuple[RoleRecord, ...]
    refreshed_at: float
    by_name: Mapping[str, RoleRecord] = field(init=False, repr=False)

    def __post_init__(self):
        by_name = {}
        for record in self.records:
            # First record wins when two stored names normalize alike.
            by_name.setdefault(record.normalized_name, record)
        object.__setattr__(self, "by_name", MappingProxyType(by_name))

    @classmethod
    def empty(cls) -> "CatalogSnapshot":
        return cls(records=(), refreshed_at=0.0)


class RoleCatalogCache:
    """Role catalog keyed by normalized role name.

    The whole catalog is replaced in one assignment, so readers always see
    either the previous snapshot or the new one. Concurrent misses are
    serialized on a lock and re-check staleness once inside it, so a burst
    of callers after expiry causes a single provider fetch. Callers queued
    behind a failed fetch share its empty result instead of retrying in turn.
    Providers may return ``RoleRecord`` objects or plain row mappings; any
    other result counts as a failed fetch.

    ``invalidate()`` is synchronous and safe to call while a fetch is in
    flight: that fetch still answers its own caller but is not stored, and
    the next read fetches again.
    """

    def __init__(
        self,
        provider: RoleDataProvider,
        ttl_seconds: float = CacheTTL.ROLE_CATALOG,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize role catalog cache.

        Args:
            provider: Source of role records
            ttl_seconds: Lifetime of a fetched catalog
            clock: Monotonic time source, injectable for tests
        """
        if ttl_seconds <= 0:
            raise ValueError("TTL must be positive")

        self.provider = provider
        self.ttl_seconds = ttl_seconds
        self._clock = clock

        self._snapshot: Optional[CatalogSnapshot] = None
        self._generation = 0
        self._lock = asyncio.Lock()
        self._attempts = 0
        self._last_attempt_failed = False

        # Statistics
        self._fetch_count = 0
        self._failure_count = 0

    @property
    def is_stale(self) -> bool:
        """Check if the next read has to go to the provider."""
        return self._fresh_snapshot() is None

    @property
    def last_refresh(self) -> Optional[float]:
        snapshot = self._snapshot
        return snapshot.refreshed_at if snapshot is not None else None

    @property
    def fetch_count(self) -> int:
        return self._fetch_count

    @property
    def failure_count(self) -> int:
        return self._failure_count

    def _fresh_snapshot(self) -> Optional[CatalogSnapshot]:
        snapshot = self._snapshot
        if snapshot is None:
            return None
        if self._clock() - snapshot.refreshed_at >= self.ttl_seconds:
            return None
        return snapshot

    async def get_snapshot(self) -> CatalogSnapshot:
        """Get a fresh-or-cached catalog snapshot.

        Never raises for provider failures; an empty snapshot is returned
        instead, meaning "no roles resolvable right now".
        """
        snapshot = self._fresh_snapshot()
        if snapshot is not None:
            return snapshot

        attempts_seen = self._attempts
        async with self._lock:
            # Another caller may have refreshed while we waited
            snapshot = self._fresh_snapshot()
            if snapshot is not None:
                return snapshot
            # A fetch that failed while we waited answers us too
            if self._attempts != attempts_seen and self._last_attempt_failed:
                return CatalogSnapshot.empty()
            return await self._refresh()

    async def get_roles_cached(self) -> List[RoleRecord]:
        """Get every known role, fetching when the cache is stale."""
        snapshot = await self.get_snapshot()
        return list(snapshot.records)

    async def get_role(self, role_name: Optional[str]) -> Optional[RoleRecord]:
        """Get the cached role whose normalized name matches ``role_name``."""
        normalized = normalize_role_name(role_name)
        if not normalized:
            return None
        snapshot = await self.get_snapshot()
        return snapshot.by_name.get(normalized)

    def invalidate(self) -> None:
        """Drop the cached catalog so the next read refetches."""
        self._generation += 1
        self._snapshot = None
        logger.info("Role catalog cache invalidated")

    # Name used by callers that mutate roles
    invalidate_role_cache = invalidate

    async def _refresh(self) -> CatalogSnapshot:
        generation = self._generation
        self._fetch_count += 1

        try:
            fetched = await self.provider.fetch_all_roles()
            records = _coerce_records(fetched)
        except Exception as e:
            self._failure_count += 1
            self._attempts += 1
            self._last_attempt_failed = True
            logger.error(f"Failed to fetch roles from role data provider: {e}")
            return CatalogSnapshot.empty()

        self._attempts += 1
        self._last_attempt_failed = False
        snapshot = CatalogSnapshot(records=records, refreshed_at=self._clock())

        if generation == self._generation:
            self._snapshot = snapshot
            logger.debug(f"Role catalog refreshed with {len(snapshot.records)} roles")
        else:
            logger.debug("Role catalog invalidated during fetch, result not cached")

        return snapshot

    def __repr__(self) -> str:
        size = len(self._snapshot.records) if self._snapshot is not None else 0
        return f"RoleCatalogCache(ttl={self.ttl_seconds}s, roles={size}, fetches={self._fetch_count})"


def _coerce_records(fetched: Optional[Iterable[Any]]) -> Tuple[RoleRecord, ...]:
    """Turn a provider result into role records, accepting plain row mappings."""
    if fetched is None:
        raise TypeError("role data provider returned None")

    records = []
    for item in fetched:
        if isinstance(item, RoleRecord):
            records.append(item)
        elif isinstance(item, Mapping):
            records.append(RoleRecord.from_mapping(item))
        else:
            raise TypeError(f"Unsupported role entry from provider: {item!r}")
    return tuple(records)
