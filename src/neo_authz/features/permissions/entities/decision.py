"""Grant decision value objects."""

from dataclasses import dataclass
from enum import Enum


class GrantReason(str, Enum):
    """Which check of the matching algorithm decided the outcome."""

    EXACT_MATCH = "exact_match"
    SHORT_FORM = "short_form"
    SHORT_FORM_MISMATCH = "short_form_mismatch"
    NAMESPACE_MISMATCH = "namespace_mismatch"
    SCOPE_INSUFFICIENT = "scope_insufficient"
    SCOPE_UNRECOGNIZED = "scope_unrecognized"
    ACTION_MATCH = "action_match"
    ACTION_SYNONYM = "action_synonym"
    ACTION_IMPLIED = "action_implied"
    ACTION_UNCONSTRAINED = "action_unconstrained"
    ACTION_MISMATCH = "action_mismatch"
    FALLBACK_EQUAL = "fallback_equal"
    FALLBACK_UNEQUAL = "fallback_unequal"


_FALLBACK_REASONS = frozenset({GrantReason.FALLBACK_EQUAL, GrantReason.FALLBACK_UNEQUAL})


@dataclass(frozen=True)
class GrantDecision:
    """Immutable outcome of comparing one held token with one requested token."""

    held: str
    requested: str
    granted: bool
    reason: GrantReason

    @property
    def denied(self) -> bool:
        return not self.granted

    @property
    def used_fallback(self) -> bool:
        """True when either token failed to parse and raw equality decided."""
        return self.reason in _FALLBACK_REASONS

    def __str__(self) -> str:
        status = "GRANTED" if self.granted else "DENIED"
        return f"{status}: {self.held!r} -> {self.requested!r} ({self.reason.value})"
