"""In-memory role data provider."""

from typing import Any, Iterable, List, Mapping, Sequence, Union

from ..entities.role import RoleRecord


class StaticRoleProvider:
    """Serves a fixed list of role records.

    Used for fixtures, demo tenants and services that load their roles
    from configuration instead of a database.
    """

    def __init__(self, records: Iterable[Union[RoleRecord, Mapping[str, Any]]] = ()):
        self._records: List[RoleRecord] = self._coerce(records)

    @staticmethod
    def _coerce(records: Iterable[Union[RoleRecord, Mapping[str, Any]]]) -> List[RoleRecord]:
        return [
            record if isinstance(record, RoleRecord) else RoleRecord.from_mapping(record)
            for record in records
        ]

    def replace(self, records: Iterable[Union[RoleRecord, Mapping[str, Any]]]) -> None:
        """Swap the served catalog; callers must invalidate their caches."""
        self._records = self._coerce(records)

    async def fetch_all_roles(self) -> Sequence[RoleRecord]:
        return list(self._records)
