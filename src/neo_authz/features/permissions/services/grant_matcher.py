"""Grant matching between a held permission token and a requested one.

Checks run in a fixed order:

1. Either side fails to parse: raw string equality decides (fallback).
2. Identical normalized tokens grant.
3. Short forms (``read``, ``write``, ...) match namespace-agnostically
   against the other side's action, and decide on their own. A short form
   carries no action, so letting a mismatch fall through to steps 4-6 would
   let ``read`` grant ``write``; a mismatch here denies.
4. ``app``/``domain``/``resource`` present on both sides must be equal.
5. A requested scope must not be broader than the held scope.
6. The held action must equal, be a synonym of, or imply the requested one.
"""

import logging
from typing import Mapping, Optional

from ..entities.actions import implied_by, short_form_satisfiers, synonyms_of
from ..entities.aliases import LEGACY_PERMISSION_ALIASES
from ..entities.decision import GrantDecision, GrantReason
from ..entities.token import PermissionScope, PermissionToken
from .token_parser import parse

logger = logging.getLogger(__name__)


def grants(
    held: Optional[str],
    requested: Optional[str],
    aliases: Mapping[str, str] = LEGACY_PERMISSION_ALIASES,
) -> bool:
    """Check if holding ``held`` is sufficient for ``requested``."""
    return evaluate_grant(held, requested, aliases).granted


def evaluate_grant(
    held: Optional[str],
    requested: Optional[str],
    aliases: Mapping[str, str] = LEGACY_PERMISSION_ALIASES,
) -> GrantDecision:
    """Compare a held token with a requested token and say why.

    Args:
        held: Permission string the caller holds
        requested: Permission string being asked for
        aliases: Legacy alias table used while parsing both sides

    Returns:
        GrantDecision tagged with the check that decided it
    """
    held_token = parse(held, aliases)
    requested_token = parse(requested, aliases)

    def decide(granted: bool, reason: GrantReason) -> GrantDecision:
        return GrantDecision(
            held=held if isinstance(held, str) else "",
            requested=requested if isinstance(requested, str) else "",
            granted=granted,
            reason=reason,
        )

    if held_token is None or requested_token is None:
        equal = isinstance(held, str) and isinstance(requested, str) and held == requested
        logger.debug(f"Unparseable permission, comparing verbatim: {held!r} vs {requested!r} -> {equal}")
        return decide(equal, GrantReason.FALLBACK_EQUAL if equal else GrantReason.FALLBACK_UNEQUAL)

    if held_token.original == requested_token.original:
        return decide(True, GrantReason.EXACT_MATCH)

    if held_token.is_short_form or requested_token.is_short_form:
        if _short_form_satisfied(held_token, requested_token) or _short_form_satisfied(requested_token, held_token):
            return decide(True, GrantReason.SHORT_FORM)
        return decide(False, GrantReason.SHORT_FORM_MISMATCH)

    if not _namespaces_agree(held_token, requested_token):
        return decide(False, GrantReason.NAMESPACE_MISMATCH)

    scope_reason = _scope_denial(held_token, requested_token)
    if scope_reason is not None:
        return decide(False, scope_reason)

    action_reason = _action_reason(held_token, requested_token)
    return decide(action_reason is not GrantReason.ACTION_MISMATCH, action_reason)


def _short_form_satisfied(short_token: PermissionToken, other: PermissionToken) -> bool:
    """Check if ``short_token``'s short form is satisfied by ``other``'s full form."""
    if short_token.short is None or other.action is None:
        return False
    return other.action in short_form_satisfiers(short_token.short)


def _namespaces_agree(held: PermissionToken, requested: PermissionToken) -> bool:
    for held_segment, requested_segment in zip(held.namespace(), requested.namespace()):
        if held_segment is not None and requested_segment is not None and held_segment != requested_segment:
            return False
    return True


def _scope_denial(held: PermissionToken, requested: PermissionToken) -> Optional[GrantReason]:
    """Return the denial reason for the scope check, or None if it passes."""
    # A missing scope on either side places no constraint.
    if requested.scope is None or held.scope is None:
        return None

    held_rank = PermissionScope.rank_of(held.scope)
    requested_rank = PermissionScope.rank_of(requested.scope)
    if held_rank is None or requested_rank is None:
        return GrantReason.SCOPE_UNRECOGNIZED
    if held_rank < requested_rank:
        return GrantReason.SCOPE_INSUFFICIENT
    return None


def _action_reason(held: PermissionToken, requested: PermissionToken) -> GrantReason:
    if requested.action is None:
        return GrantReason.ACTION_UNCONSTRAINED
    if held.action is None:
        return GrantReason.ACTION_MISMATCH
    if held.action == requested.action:
        return GrantReason.ACTION_MATCH
    if requested.action in synonyms_of(held.action):
        return GrantReason.ACTION_SYNONYM
    if requested.action in implied_by(held.action):
        return GrantReason.ACTION_IMPLIED
    return GrantReason.ACTION_MISMATCH
