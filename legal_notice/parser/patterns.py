"""Constant pattern tables for the legal notice parser.

Every table in this module is process-wide, read-only configuration: tuples,
frozensets, ``MappingProxyType`` views and pre-compiled regular expressions.
Nothing here is mutated after import.
"""

from __future__ import annotations

import re
from types import MappingProxyType

from .models import AttributionType


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------

# Textual and alternative notations of the two rights symbols.
SYMBOL_ALIASES = MappingProxyType({
    "(c)": AttributionType.COPYRIGHT.value,
    "(p)": AttributionType.PHONOGRAM.value,
    "Ⓒ": AttributionType.COPYRIGHT.value,
    "Ⓟ": AttributionType.PHONOGRAM.value,
})

_SYMBOL_ALIAS_LOOKUP = MappingProxyType({
    alias.casefold(): symbol for alias, symbol in SYMBOL_ALIASES.items()
})
_SYMBOL_ALIAS_PATTERN = re.compile(
    "|".join(re.escape(alias) for alias in SYMBOL_ALIASES), re.IGNORECASE
)

UNICODE_HYPHENS = "‐᠆‑‒–—﹘﹣－"
_UNICODE_HYPHEN_PATTERN = re.compile(f"[{UNICODE_HYPHENS}]")

# Release importers often wrap notice bodies in French quotes.
_GUILLEMET_PATTERN = re.compile(r"«\s*(.*?)\s*»")


def normalize_symbols(text: str) -> str:
    """Replace ``(C)``, ``(P)``, ``Ⓒ`` and ``Ⓟ`` with the canonical glyphs."""
    return _SYMBOL_ALIAS_PATTERN.sub(
        lambda m: _SYMBOL_ALIAS_LOOKUP[m.group(0).casefold()], text
    )


def normalize_hyphens(text: str) -> str:
    """Map all Unicode dash variants to an ASCII hyphen."""
    return _UNICODE_HYPHEN_PATTERN.sub("-", text)


def strip_guillemets(text: str) -> str:
    """Remove enclosing « » quotes, keeping the quoted body."""
    return _GUILLEMET_PATTERN.sub(r"\1", text)


# ---------------------------------------------------------------------------
# Rights symbols and years
# ---------------------------------------------------------------------------

# "©", "℗©", "℗ & ©", "℗ + ©", "℗ and ©"
SYMBOL_CLUSTER_PATTERN = re.compile(
    r"[©℗](?:\s*(?:&|\+|\band\b)?\s*[©℗])*", re.IGNORECASE
)
SYMBOL_PATTERN = re.compile(r"[©℗]")

YEAR_SEPARATOR = r"\s*(?:[,&/+]|\band\b)\s*"
YEAR_RANGE_SEPARATOR = rf"\s*[-{UNICODE_HYPHENS}]\s*"
# "2014" or a range such as "2010-2015"
YEAR_ITEM = rf"\d{{4}}(?:{YEAR_RANGE_SEPARATOR}\d{{4}})?"
YEAR_LIST = rf"(?<!\d){YEAR_ITEM}(?:{YEAR_SEPARATOR}{YEAR_ITEM})*(?!\d)"
YEAR_SPLIT_PATTERN = re.compile(YEAR_SEPARATOR, re.IGNORECASE)
YEAR_RANGE_PATTERN = re.compile(YEAR_RANGE_SEPARATOR)

# Years written before or after the owner of a relation clause.
LEADING_YEARS_PATTERN = re.compile(rf"^(?P<years>{YEAR_LIST})[\s,:]+", re.IGNORECASE)
TRAILING_YEARS_PATTERN = re.compile(rf"\s+(?P<years>{YEAR_LIST})$", re.IGNORECASE)

# Text right after a symbol cluster: an optional release label closed by a
# semicolon, up to three descriptive words ("Digital Remaster") and the years.
SEGMENT_HEAD_PATTERN = re.compile(
    rf"""
    ^\s*
    (?:(?P<label>[^;\d]+?)\s*;\s*)?
    (?P<filler>(?:[^\W\d_]+\s+){{0,3}}?)
    (?P<years>{YEAR_LIST})
    [\s,:]*
    """,
    re.IGNORECASE | re.VERBOSE,
)


# ---------------------------------------------------------------------------
# Boilerplate
# ---------------------------------------------------------------------------

# Filler between the year and the owner, skipped before name extraction.
BOILERPLATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^(?:the\s+)?(?:copyright|rights?)\s+in\s+this\s+"
        r"(?P<category>sound\s+recording|compilation|recording|album|artwork)\s+"
        r"(?:is|are)\s+owned\s+by\s+",
        re.IGNORECASE,
    ),
    re.compile(r"^by\s+", re.IGNORECASE),
)

ALL_RIGHTS_RESERVED = r"all\s+rights\s+reserved"


# ---------------------------------------------------------------------------
# Relation clauses
# ---------------------------------------------------------------------------

# Ordered (pattern, types) rules; longer phrases come first so that the
# combined alternation prefers them.
RELATION_RULES: tuple[tuple[str, tuple[AttributionType, ...]], ...] = (
    (r"under\s+exclusive\s+licen[cs]e\s+to", (AttributionType.LICENSED_TO,)),
    (r"licen[cs]ed\s+to", (AttributionType.LICENSED_TO,)),
    (r"licen[cs]ed\s+from", (AttributionType.LICENSED_FROM,)),
    (
        r"marketed\s+and\s+distributed\s+by",
        (AttributionType.MARKETED_BY, AttributionType.DISTRIBUTED_BY),
    ),
    (
        r"distributed\s+and\s+marketed\s+by",
        (AttributionType.DISTRIBUTED_BY, AttributionType.MARKETED_BY),
    ),
    (r"marketed\s+by", (AttributionType.MARKETED_BY,)),
    (r"distributed\s+by", (AttributionType.DISTRIBUTED_BY,)),
)

_COMPILED_RELATION_RULES = tuple(
    (re.compile(pattern, re.IGNORECASE), types) for pattern, types in RELATION_RULES
)

RELATION_PHRASE = "|".join(f"(?:{pattern})" for pattern, _ in RELATION_RULES)


def relation_types(phrase: str) -> tuple[AttributionType, ...]:
    """Look up the attribution types for a matched relation phrase."""
    for pattern, types in _COMPILED_RELATION_RULES:
        if pattern.fullmatch(phrase):
            return types
    return ()


# ---------------------------------------------------------------------------
# Company suffixes
# ---------------------------------------------------------------------------

# Case-sensitive on purpose: "as", "co" and "ag" are ordinary words.
COMPANY_SUFFIXES: tuple[str, ...] = (
    "Ltd", "LTD", "Limited", "LIMITED", "LLC", "L.L.C", "LLP", "Inc", "INC",
    "Incorporated", "Corp", "Corporation", "Co", "Company", "GmbH", "GMBH",
    "AG", "AB", "AS", "A/S", "ApS", "BV", "B.V", "NV", "N.V", "SA", "S.A",
    "SARL", "S.L", "S.r.l", "SpA", "Oy", "KG", "Pty", "PLC", "Plc",
)

# Suffixes that are abbreviations and regularly carry a trailing full stop.
ABBREVIATED_SUFFIXES = frozenset({
    "Ltd", "LTD", "Inc", "INC", "Corp", "Co", "Bros", "Pty", "Ent", "B.V",
    "N.V", "S.A", "S.L", "S.r.l", "L.L.C",
})

_SUFFIX_ALTERNATION = "|".join(
    re.escape(suffix) for suffix in sorted(COMPANY_SUFFIXES, key=len, reverse=True)
)

COMPANY_SUFFIX_PATTERN = re.compile(rf"(?<![\w/.])(?:{_SUFFIX_ALTERNATION})\.?$")
BARE_SUFFIX_PATTERN = re.compile(rf"^(?:{_SUFFIX_ALTERNATION})\.?$")
ABBREVIATED_SUFFIX_PATTERN = re.compile(
    r"(?<![\w/])(?:"
    + "|".join(re.escape(suffix) for suffix in sorted(ABBREVIATED_SUFFIXES, key=len, reverse=True))
    + r")$"
)


# ---------------------------------------------------------------------------
# Terminators and name extraction
# ---------------------------------------------------------------------------

# End of the owner span inside a rights-symbol segment.
SEGMENT_TERMINATOR_PATTERN = re.compile(
    rf"""
    \s*[.,;]?\s*\b{ALL_RIGHTS_RESERVED}\b
    | [,;]?\s*\b(?:{RELATION_PHRASE})\b
    | \s*;
    """,
    re.IGNORECASE | re.VERBOSE,
)

RELATION_PATTERN = re.compile(rf"\b(?P<phrase>{RELATION_PHRASE})\b\s*", re.IGNORECASE)

# Owner span after a relation phrase: stops at a comma, a semicolon, another
# rights symbol, a sentence-ending full stop or the next relation phrase.
# A ", LLC" style suffix after the comma still belongs to the name.
RELATION_NAME_PATTERN = re.compile(
    rf"""
    ^(?P<name>[^,;©℗]+?(?:,\s*(?:LLC|LLP|Inc|Ltd)\b\.?)?)
    (?=
        \s*(?:[,;©℗]|(?<![\s.][A-Z])\.(?=[\s,;]|$)|$)
      | \s+(?:{RELATION_PHRASE}|{ALL_RIGHTS_RESERVED})\b
    )
    """,
    re.IGNORECASE | re.VERBOSE,
)

TRAILING_LIST_PUNCTUATION = " \t,;:/|-"
