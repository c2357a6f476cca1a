"""Permission token normalization and parsing.

Both functions are pure and never raise: malformed input normalizes to an
empty string and parses to ``None``.
"""

from typing import Mapping, Optional

from ..entities.aliases import LEGACY_PERMISSION_ALIASES
from ..entities.token import PermissionToken


SEGMENT_SEPARATOR = ":"


def normalize(token: Optional[str], aliases: Mapping[str, str] = LEGACY_PERMISSION_ALIASES) -> str:
    """Normalize a permission string to its canonical spelling.

    Strips surrounding whitespace, rewrites hyphens to underscores and then
    applies an exact-match legacy alias rewrite.

    Args:
        token: Raw permission string
        aliases: Exact-match rewrite table

    Returns:
        Canonical permission string, or ``""`` for empty input
    """
    if not isinstance(token, str):
        return ""

    value = token.strip()
    if not value:
        return ""

    value = value.replace("-", "_")
    return aliases.get(value, value)


def parse(token: Optional[str], aliases: Mapping[str, str] = LEGACY_PERMISSION_ALIASES) -> Optional[PermissionToken]:
    """Parse a permission string into a ``PermissionToken``.

    Exactly four segments parse as ``app:domain:resource:action`` with no
    scope. Five or more segments carry a scope made of every middle segment
    joined back with ``:``.

    Returns:
        Parsed token, or None if nothing parseable remains after normalizing
    """
    original = normalize(token, aliases)
    if not original:
        return None

    segments = [segment for segment in original.split(SEGMENT_SEPARATOR) if segment]
    count = len(segments)

    if count == 0:
        return None

    if count == 1:
        return PermissionToken(original=original, short=segments[0])

    if count == 2:
        return PermissionToken(original=original, domain=segments[0], action=segments[1])

    if count == 3:
        return PermissionToken(
            original=original,
            app=segments[0],
            domain=segments[1],
            action=segments[2],
        )

    scope = SEGMENT_SEPARATOR.join(segments[3:-1]) if count > 4 else None
    return PermissionToken(
        original=original,
        app=segments[0],
        domain=segments[1],
        resource=segments[2],
        scope=scope,
        action=segments[-1],
    )
