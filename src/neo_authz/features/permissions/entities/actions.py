"""Action vocabulary and the fixed action tables used by grant matching.

Tables are keyed by ``Action`` members so a misspelt entry fails at import
time; they are exposed as plain ``str -> frozenset[str]`` mappings because
tokens carry arbitrary action strings.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping


class Action(str, Enum):
    """Actions with a fixed meaning in the matching tables."""

    READ = "read"
    VIEW = "view"
    WRITE = "write"
    CREATE = "create"
    UPDATE = "update"
    EDIT = "edit"
    DELETE = "delete"
    REMOVE = "remove"
    ACCESS = "access"
    MANAGE = "manage"
    ADMIN = "admin"
    CONTROL = "control"
    ASSIGN = "assign"
    APPROVE = "approve"
    EXPORT = "export"
    IMPORT = "import"
    SHARE = "share"
    MOVE = "move"


def _table(entries: Dict[Action, Iterable[Action]]) -> Mapping[str, FrozenSet[str]]:
    return MappingProxyType({
        key.value: frozenset(action.value for action in values)
        for key, values in entries.items()
    })


# Short form -> full-form actions that satisfy it. Short forms not listed
# are satisfied only by the identical action.
SHORT_FORM_SATISFIERS = _table({
    Action.READ: (Action.READ, Action.VIEW, Action.MANAGE),
    Action.WRITE: (Action.CREATE, Action.UPDATE, Action.WRITE, Action.MANAGE),
    Action.DELETE: (Action.DELETE, Action.MANAGE),
})

# Symmetric: every pair appears in both directions.
ACTION_SYNONYMS = _table({
    Action.READ: (Action.VIEW, Action.ACCESS),
    Action.VIEW: (Action.READ, Action.ACCESS),
    Action.ACCESS: (Action.READ, Action.VIEW),
    Action.UPDATE: (Action.WRITE, Action.EDIT),
    Action.WRITE: (Action.UPDATE, Action.EDIT),
    Action.EDIT: (Action.UPDATE, Action.WRITE),
    Action.DELETE: (Action.REMOVE,),
    Action.REMOVE: (Action.DELETE,),
})

_ADMINISTRATIVE_ACTIONS = (
    Action.READ,
    Action.VIEW,
    Action.CREATE,
    Action.UPDATE,
    Action.DELETE,
    Action.ASSIGN,
    Action.APPROVE,
    Action.EXPORT,
    Action.IMPORT,
    Action.SHARE,
    Action.MOVE,
)

# Held action -> requested actions it implies. One directional.
ACTION_IMPLICATIONS = _table({
    Action.MANAGE: _ADMINISTRATIVE_ACTIONS,
    Action.ADMIN: _ADMINISTRATIVE_ACTIONS,
    Action.CONTROL: _ADMINISTRATIVE_ACTIONS,
    Action.WRITE: (Action.CREATE, Action.UPDATE),
    Action.VIEW: (Action.READ,),
})

_EMPTY: FrozenSet[str] = frozenset()


def short_form_satisfiers(short: str) -> FrozenSet[str]:
    """Full-form actions that satisfy a short-form token."""
    return SHORT_FORM_SATISFIERS.get(short, frozenset((short,)))


def synonyms_of(action: str) -> FrozenSet[str]:
    return ACTION_SYNONYMS.get(action, _EMPTY)


def implied_by(action: str) -> FrozenSet[str]:
    return ACTION_IMPLICATIONS.get(action, _EMPTY)
