"""Protocol interfaces for the roles feature."""

from abc import abstractmethod
from typing import Protocol, Sequence, runtime_checkable

from .role import RoleRecord


@runtime_checkable
class RoleDataProvider(Protocol):
    """Source of the full role catalog.

    Implementations may raise on failure; the role catalog cache absorbs
    any error and degrades to an empty catalog.
    """

    @abstractmethod
    async def fetch_all_roles(self) -> Sequence[RoleRecord]:
        """Fetch every defined role."""
        ...
