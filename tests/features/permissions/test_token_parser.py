"""Tests for permission token normalization and parsing."""

import pytest

from neo_authz.features.permissions.entities.aliases import LEGACY_PERMISSION_ALIASES
from neo_authz.features.permissions.entities.token import PermissionScope, PermissionToken
from neo_authz.features.permissions.services.token_parser import normalize, parse


TOKEN_FIELDS = ("app", "domain", "resource", "scope", "action", "short")


def populated_fields(token: PermissionToken):
    return {name for name in TOKEN_FIELDS if getattr(token, name) is not None}


class TestNormalize:
    """Test permission string normalization."""

    def test_strips_whitespace(self):
        assert normalize("  crm:customer:record:read \n") == "crm:customer:record:read"

    def test_empty_and_blank_input(self):
        assert normalize("") == ""
        assert normalize("   ") == ""
        assert normalize(None) == ""

    def test_hyphens_become_underscores(self):
        assert normalize("crm:service-contract:record:read") == "crm:service_contract:record:read"

    def test_legacy_alias_rewritten(self):
        assert normalize("dashboard:view") == "crm:dashboard:panel:view"

    def test_alias_matched_after_hyphen_rewrite(self):
        assert normalize("manage-customers") == "crm:customer:record:manage"

    def test_alias_is_exact_match_only(self):
        assert normalize("dashboard:view:extra") == "dashboard:view:extra"
        assert normalize("crm:dashboard:view") == "crm:dashboard:view"

    def test_custom_alias_table(self):
        aliases = {"reports:view": "crm:report:record:view"}
        assert normalize("reports:view", aliases) == "crm:report:record:view"
        assert normalize("dashboard:view", aliases) == "dashboard:view"

    @pytest.mark.parametrize("raw", [
        "  dashboard:view ",
        "manage-customers",
        "crm:sales:deal:tenant:read",
        "a-b-c",
        "",
        " : : ",
        "READ",
    ])
    def test_idempotent(self, raw):
        once = normalize(raw)
        assert normalize(once) == once

    def test_alias_table_is_idempotent(self):
        for canonical in LEGACY_PERMISSION_ALIASES.values():
            assert canonical not in LEGACY_PERMISSION_ALIASES
            assert "-" not in canonical
            assert normalize(canonical) == canonical


class TestParse:
    """Test segment-count driven parsing."""

    def test_single_segment_is_short_form(self):
        token = parse("read")

        assert token == PermissionToken(original="read", short="read")
        assert token.is_short_form
        assert populated_fields(token) == {"short"}

    def test_two_segments(self):
        token = parse("customers:export")

        assert token.domain == "customers"
        assert token.action == "export"
        assert populated_fields(token) == {"domain", "action"}

    def test_three_segments(self):
        token = parse("crm:dashboard:view")

        assert (token.app, token.domain, token.action) == ("crm", "dashboard", "view")
        assert populated_fields(token) == {"app", "domain", "action"}

    def test_four_segments_have_no_scope(self):
        token = parse("crm:customer:record:read")

        assert token.resource == "record"
        assert token.action == "read"
        assert token.scope is None
        assert populated_fields(token) == {"app", "domain", "resource", "action"}

    def test_five_segments_carry_scope(self):
        token = parse("crm:sales:deal:tenant:read")

        assert token.scope == "tenant"
        assert token.scope_rank == PermissionScope.TENANT.rank
        assert populated_fields(token) == {"app", "domain", "resource", "scope", "action"}

    def test_multi_segment_scope_is_joined(self):
        token = parse("crm:sales:deal:team:north:read")

        assert token.scope == "team:north"
        assert token.action == "read"
        assert token.scope_rank is None

    def test_empty_segments_discarded(self):
        token = parse("crm::customer:record::read")

        assert token.original == "crm::customer:record::read"
        assert token.segment_count == 4
        assert (token.app, token.domain, token.resource, token.action) == ("crm", "customer", "record", "read")

    def test_alias_applied_before_parsing(self):
        token = parse("dashboard:view")

        assert token.original == "crm:dashboard:panel:view"
        assert token.resource == "panel"

    @pytest.mark.parametrize("raw", ["", "   ", ":", ":::", None, 42])
    def test_unparseable_returns_none(self, raw):
        assert parse(raw) is None

    @pytest.mark.parametrize("raw", [
        "read",
        "sales:read",
        "crm:dashboard:view",
        "crm:customer:record:read",
        "crm:sales:deal:own:update",
        "dashboard:view",
    ])
    def test_parse_is_stable_under_reparse(self, raw):
        token = parse(raw)
        assert parse(token.original) == token


class TestPermissionScope:
    """Test scope ordering."""

    def test_ordering(self):
        ranks = [scope.rank for scope in (
            PermissionScope.OWN,
            PermissionScope.TEAM,
            PermissionScope.ORG,
            PermissionScope.TENANT,
            PermissionScope.GLOBAL,
        )]
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == 5

    def test_rank_of_unknown(self):
        assert PermissionScope.rank_of("galaxy") is None
        assert PermissionScope.rank_of(None) is None
        assert PermissionScope.rank_of("own") == 0
