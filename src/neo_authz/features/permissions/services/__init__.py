"""Pure permission parsing and grant matching services."""

from .token_parser import normalize, parse
from .grant_matcher import grants, evaluate_grant

__all__ = ["normalize", "parse", "grants", "evaluate_grant"]
