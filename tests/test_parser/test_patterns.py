"""Tests for the constant pattern tables (legal_notice.parser.patterns)."""

from __future__ import annotations

import pytest

from legal_notice.parser.models import AttributionType
from legal_notice.parser.patterns import (
    COMPANY_SUFFIX_PATTERN,
    RELATION_RULES,
    SYMBOL_ALIASES,
    SYMBOL_CLUSTER_PATTERN,
    normalize_hyphens,
    normalize_symbols,
    relation_types,
    strip_guillemets,
)


pytestmark = pytest.mark.unit


class TestNormalisation:
    @pytest.mark.parametrize("text,expected", [
        ("(C) 2001", "© 2001"),
        ("(c) 2001", "© 2001"),
        ("(P) 2001", "℗ 2001"),
        ("(p)(c) 2001", "℗© 2001"),
        ("Ⓒ 2001", "© 2001"),
        ("Ⓟ 2001", "℗ 2001"),
        ("Foo (UK) Ltd", "Foo (UK) Ltd"),
    ])
    def test_normalize_symbols(self, text, expected):
        assert normalize_symbols(text) == expected

    def test_normalize_hyphens(self):
        assert normalize_hyphens("A – B — C ‐ D") == "A - B - C - D"

    def test_strip_guillemets(self):
        assert strip_guillemets("© «2017 Foo»") == "© 2017 Foo"

    def test_strip_guillemets_without_quotes(self):
        assert strip_guillemets("© 2017 Foo") == "© 2017 Foo"


class TestTables:
    def test_aliases_are_read_only(self):
        with pytest.raises(TypeError):
            SYMBOL_ALIASES["(r)"] = "®"  # type: ignore[index]

    def test_relation_rules_are_immutable(self):
        assert isinstance(RELATION_RULES, tuple)

    @pytest.mark.parametrize("phrase,expected", [
        ("under exclusive licence to", (AttributionType.LICENSED_TO,)),
        ("Licensed From", (AttributionType.LICENSED_FROM,)),
        ("marketed and distributed by", (AttributionType.MARKETED_BY, AttributionType.DISTRIBUTED_BY)),
        ("published by", ()),
    ])
    def test_relation_types(self, phrase, expected):
        assert relation_types(phrase) == expected


class TestSymbolCluster:
    @pytest.mark.parametrize("text,cluster", [
        ("© 2001", "©"),
        ("℗© 2001", "℗©"),
        ("℗ & © 2001", "℗ & ©"),
        ("℗ and © 2001", "℗ and ©"),
        ("℗Motown", "℗"),
    ])
    def test_cluster(self, text, cluster):
        assert SYMBOL_CLUSTER_PATTERN.search(text).group(0) == cluster


class TestCompanySuffix:
    @pytest.mark.parametrize("name,expected", [
        ("Foo Records Ltd", True),
        ("Foo Records Ltd.", True),
        ("Universal Music A/S", True),
        ("Foo Records", False),
        ("known as", False),
    ])
    def test_suffix(self, name, expected):
        assert bool(COMPANY_SUFFIX_PATTERN.search(name)) is expected
