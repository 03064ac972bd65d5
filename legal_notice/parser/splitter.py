"""Multi-entity splitting of owner name spans.

``split_names`` turns one extracted name span such as
``"Shady Records/Aftermath Records"`` into the individual names.  Splitting
prefers to do nothing: a candidate separator is only honoured when both sides
look like independent names, so ``"Universal Music A/S"`` or ``"AC/DC"`` stay
intact.
"""

from __future__ import annotations

import logging
import re

from .patterns import (
    BARE_SUFFIX_PATTERN,
    COMPANY_SUFFIX_PATTERN,
    TRAILING_LIST_PUNCTUATION,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_NAME_SEPARATOR = r"\s*\|\s*|\s*/\s*|\s+-\s+"

_DEFAULT_SEPARATOR_PATTERN = re.compile(DEFAULT_NAME_SEPARATOR)

# "X for the U.S. and Y for the world outside the U.S."
_REGION_PATTERN = re.compile(
    r"^(?P<first>.+?)\s+for\s+(?:the\s+)?(?P<first_region>[^,;]+?)\s+"
    r"and\s+(?P<second>.+?)\s+for\s+(?:the\s+)?(?P<second_region>[^,;]+)$",
    re.IGNORECASE,
)

# "Foo Records Ltd, Bar Music Inc." / "Foo Ltd and Bar GmbH"
_CONJUNCTION_PATTERN = re.compile(r"\s*,\s*|\s+(?:and|&)\s+", re.IGNORECASE)

# Short letter groups around a slash form one abbreviation ("A/S", "w/o").
_ABBREVIATION_LEFT = re.compile(r"(?:^|[\s(])[^\W\d_]{1,2}$")
_ABBREVIATION_RIGHT = re.compile(r"^[^\W\d_]{1,2}(?:$|[\s).,])")

# Leftovers that are never names on their own.
KNOWN_FRAGMENTS = frozenset({
    "a", "s", "the", "and", "of", "for", "by", "co", "w", "o",
})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _clean(name: str) -> str:
    """Strip whitespace and trailing list punctuation."""
    return name.strip().rstrip(TRAILING_LIST_PUNCTUATION).strip()


def _is_plausible_name(fragment: str) -> bool:
    """Whether a split-off fragment can stand on its own as a name."""
    fragment = _clean(fragment)
    if len(fragment) < 2:
        return False
    if not any(ch.isalpha() for ch in fragment):
        return False
    if fragment.lower() in KNOWN_FRAGMENTS:
        return False
    return not BARE_SUFFIX_PATTERN.match(fragment)


def _is_abbreviation_slash(span: str, separator: re.Match[str]) -> bool:
    """Detect slashes that belong to an abbreviation like ``A/S``."""
    if separator.group(0) != "/":
        return False
    before = span[:separator.start()]
    after = span[separator.end():]
    return bool(_ABBREVIATION_LEFT.search(before) and _ABBREVIATION_RIGHT.match(after))


def _split_on_separators(span: str, pattern: re.Pattern[str]) -> list[str]:
    names: list[str] = []
    start = 0
    for separator in pattern.finditer(span):
        if separator.start() == separator.end():
            continue
        left = span[start:separator.start()]
        right = span[separator.end():]
        if _is_abbreviation_slash(span, separator):
            logger.debug("Not splitting abbreviation slash in %r", span)
            continue
        if not (_is_plausible_name(left) and _is_plausible_name(right)):
            logger.debug("Not splitting %r at %r", span, separator.group(0))
            continue
        names.append(left)
        start = separator.end()
    names.append(span[start:])
    return names


def _split_on_company_conjunctions(span: str) -> list[str]:
    """Split ``"A Ltd, B Inc."`` where both sides carry a company suffix."""
    names: list[str] = []
    start = 0
    for conjunction in _CONJUNCTION_PATTERN.finditer(span):
        left = _clean(span[start:conjunction.start()])
        right = _clean(span[conjunction.end():])
        if not COMPANY_SUFFIX_PATTERN.search(left):
            continue
        if not COMPANY_SUFFIX_PATTERN.search(right) or not _is_plausible_name(right):
            continue
        names.append(left)
        start = conjunction.end()
    names.append(span[start:])
    return names


def _split_regions(span: str) -> list[str] | None:
    match = _REGION_PATTERN.match(span)
    if match is None:
        return None
    first, second = match.group("first"), match.group("second")
    if not (_is_plausible_name(first) and _is_plausible_name(second)):
        return None
    return [first, second]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def split_names(
    span: str,
    separator: str | re.Pattern[str] | None = _DEFAULT_SEPARATOR_PATTERN,
    split_regions: bool = True,
) -> list[str]:
    """Split a name span into the individual entity names it lists.

    Args:
        span: The extracted owner text, e.g. ``"Data Records|Ministry of Sound"``.
        separator: Regex of list separators.  ``None`` or an empty string
            disables separator splitting.
        split_regions: Whether ``"X for the A and Y for the B"`` yields X and Y.

    Returns:
        The cleaned names in source order.  Empty when the span holds no name.
    """
    span = _clean(span)
    if not span:
        return []

    if split_regions:
        regional = _split_regions(span)
        if regional is not None:
            return [
                name
                for part in regional
                for name in split_names(part, separator, split_regions=False)
            ]

    if isinstance(separator, str):
        separator = re.compile(separator) if separator else None

    pieces = _split_on_separators(span, separator) if separator is not None else [span]

    names: list[str] = []
    for piece in pieces:
        for name in _split_on_company_conjunctions(piece):
            name = _clean(name)
            if name:
                names.append(name)
    return names
