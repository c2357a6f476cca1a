"""AsyncPG-based role data provider.

Reads the role catalog from PostgreSQL. Only the columns the authorization
engine needs are selected; soft-deleted roles are skipped.
"""

import logging
import re
from typing import List, Optional, Sequence

import asyncpg
from asyncpg import Pool

from ....config.constants import DatabaseSchemas
from ....config.settings import AuthzSettings
from ....core.exceptions import ConfigurationError, InvalidSchemaError, RoleCatalogError
from ..entities.role import RoleRecord

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class AsyncPGRoleProvider:
    """AsyncPG implementation of the RoleDataProvider protocol."""

    def __init__(
        self,
        pool: Optional[Pool] = None,
        *,
        dsn: Optional[str] = None,
        schema: str = DatabaseSchemas.ADMIN,
        table: str = "roles",
        **pool_config
    ):
        """Initialize provider.

        Args:
            pool: Existing asyncpg pool; created lazily from ``dsn`` if omitted
            dsn: PostgreSQL DSN used when no pool is given
            schema: Schema holding the roles table (``admin`` or ``tenant_*``)
            table: Roles table name
            **pool_config: Extra options for ``asyncpg.create_pool``
        """
        if pool is None and not dsn:
            raise ValueError("Either pool or dsn is required")

        self.pool = pool
        self._owns_pool = pool is None
        self.dsn = dsn.replace("+asyncpg", "") if dsn else dsn
        self.schema = self._validate_schema_name(schema)
        self.table = self._validate_table_name(table)
        self.pool_config = {
            "min_size": 1,
            "max_size": 5,
            "command_timeout": 30,
            **pool_config
        }

    @classmethod
    def from_settings(cls, settings: AuthzSettings, **pool_config) -> "AsyncPGRoleProvider":
        if settings.database_url is None:
            raise ConfigurationError("database_url is not configured", details={"setting": "database_url"})
        return cls(
            dsn=str(settings.database_url),
            schema=settings.role_schema,
            table=settings.role_table,
            **pool_config
        )

    @staticmethod
    def _validate_schema_name(schema_name: str) -> str:
        """Validate schema name to prevent SQL injection."""
        if not _IDENTIFIER.match(schema_name or ""):
            raise InvalidSchemaError(f"Invalid schema name: {schema_name}")
        if schema_name == DatabaseSchemas.ADMIN or schema_name.startswith(DatabaseSchemas.TENANT_PREFIX):
            return schema_name
        raise InvalidSchemaError(f"Invalid schema name: {schema_name}")

    @staticmethod
    def _validate_table_name(table_name: str) -> str:
        if not _IDENTIFIER.match(table_name or ""):
            raise InvalidSchemaError(f"Invalid table name: {table_name}")
        return table_name

    async def _get_pool(self) -> Pool:
        if self.pool is None:
            logger.info(f"Creating role provider pool with size {self.pool_config['max_size']}")
            self.pool = await asyncpg.create_pool(self.dsn, **self.pool_config)
        return self.pool

    async def close(self) -> None:
        """Close the pool if this provider created it."""
        if self.pool is not None and self._owns_pool:
            await self.pool.close()
            self.pool = None

    async def fetch_all_roles(self) -> Sequence[RoleRecord]:
        """Fetch every non-deleted role."""
        query = f"""
            SELECT id, name, description, is_system_role, tenant_id
            FROM {self.schema}.{self.table}
            WHERE deleted_at IS NULL
            ORDER BY name
        """

        try:
            pool = await self._get_pool()
            async with pool.acquire() as conn:
                rows = await conn.fetch(query)
        except (asyncpg.PostgresError, OSError) as e:
            logger.error(f"Failed to fetch roles from {self.schema}.{self.table}: {e}")
            raise RoleCatalogError(
                f"Failed to fetch roles: {e}",
                details={"schema": self.schema, "table": self.table}
            ) from e

        roles: List[RoleRecord] = [RoleRecord.from_mapping(row) for row in rows]
        logger.debug(f"Fetched {len(roles)} roles from {self.schema}.{self.table}")
        return roles
