"""Core legal notice parser.

Turns free-form copyright and phonographic-right notices, as printed on
physical media or shipped in digital release metadata, into
``AttributionRecord`` objects.  Parsing is a fixed, ordered set of regex rules
(see ``patterns``): no AI calls, no I/O and no state between calls.

Each line is parsed independently.  Within a line the records anchored by
rights symbols (© / ℗) come first, followed by the relation clauses
("licensed to", "distributed by", ...), each group in source order.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .models import (
    AttributionRecord,
    AttributionType,
    LineResult,
    LineStatus,
    NoticeSegment,
    ParseReport,
)
from .patterns import (
    ABBREVIATED_SUFFIX_PATTERN,
    BOILERPLATE_PATTERNS,
    LEADING_YEARS_PATTERN,
    RELATION_NAME_PATTERN,
    RELATION_PATTERN,
    SEGMENT_HEAD_PATTERN,
    SEGMENT_TERMINATOR_PATTERN,
    SYMBOL_CLUSTER_PATTERN,
    SYMBOL_PATTERN,
    TRAILING_LIST_PUNCTUATION,
    TRAILING_YEARS_PATTERN,
    YEAR_RANGE_PATTERN,
    YEAR_SPLIT_PATTERN,
    normalize_hyphens,
    normalize_symbols,
    relation_types,
    strip_guillemets,
)
from .splitter import split_names

if TYPE_CHECKING:
    from ..config import ParserConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Preprocessing
# ---------------------------------------------------------------------------

def _prepare_line(line: str, config: ParserConfig | None) -> str:
    """Normalise symbol aliases, dashes and quotes of a single line."""
    if config is None or config.normalize_hyphens:
        line = normalize_hyphens(line)
    line = normalize_symbols(line)
    line = strip_guillemets(line)
    return line.strip()


# ---------------------------------------------------------------------------
# Rights-symbol segments
# ---------------------------------------------------------------------------

def _symbol_types(cluster: str) -> list[AttributionType]:
    """Rights symbols of a cluster in the order they appear."""
    return [AttributionType(symbol) for symbol in SYMBOL_PATTERN.findall(cluster)]


def _split_years(years: str) -> list[str]:
    """Years of a year expression in source order.

    A range contributes both of its endpoints: ``"2010-2015"`` gives
    ``["2010", "2015"]``.
    """
    result: list[str] = []
    for item in YEAR_SPLIT_PATTERN.split(years):
        result.extend(year for year in YEAR_RANGE_PATTERN.split(item) if year)
    return result


def _year_value(years: list[str]) -> str | list[str] | None:
    if not years:
        return None
    return years[0] if len(years) == 1 else years


def _skip_boilerplate(text: str) -> tuple[str, str | None]:
    """Drop filler such as "The copyright in this sound recording is owned by".

    Returns the remaining text and the legal category named by the filler, if
    any.  The category is not turned into an attribution type.
    """
    for pattern in BOILERPLATE_PATTERNS:
        match = pattern.match(text)
        if match:
            category = match.groupdict().get("category")
            if category:
                logger.debug("Skipping boilerplate for legal category %r", category)
            return text[match.end():], category
    return text, None


def _cut_at_terminator(text: str) -> str:
    """Owner span up to "All Rights Reserved", a relation phrase or ';'."""
    match = SEGMENT_TERMINATOR_PATTERN.search(text)
    if match is None:
        return text.strip().rstrip(TRAILING_LIST_PUNCTUATION).strip()
    span = text[:match.start()].strip().rstrip(TRAILING_LIST_PUNCTUATION).strip()
    if match.group(0).lstrip().startswith(".") and ABBREVIATED_SUFFIX_PATTERN.search(span):
        span += "."
    return span


def _build_segment(cluster: str, body: str) -> NoticeSegment:
    """Analyse the text following one symbol cluster."""
    segment = NoticeSegment(types=_symbol_types(cluster))

    head = SEGMENT_HEAD_PATTERN.match(body)
    if head:
        segment.label = head.group("label")
        segment.years = _split_years(head.group("years"))
        body = body[head.end():]
        if segment.label:
            logger.debug("Discarding release label %r before the year", segment.label)

    body, segment.category = _skip_boilerplate(body.lstrip())
    segment.name_span = _cut_at_terminator(body)
    return segment


def _find_segments(line: str) -> list[NoticeSegment]:
    """Split a line into one segment per rights-symbol cluster."""
    clusters = list(SYMBOL_CLUSTER_PATTERN.finditer(line))
    segments: list[NoticeSegment] = []
    for index, cluster in enumerate(clusters):
        end = clusters[index + 1].start() if index + 1 < len(clusters) else len(line)
        segments.append(_build_segment(cluster.group(0), line[cluster.end():end]))
    return segments


# ---------------------------------------------------------------------------
# Relation clauses
# ---------------------------------------------------------------------------

def _relation_name(text: str) -> str | None:
    """Owner named right after a relation phrase."""
    match = RELATION_NAME_PATTERN.match(text)
    if match is None:
        return None
    name = match.group("name").strip()
    stopped_at_full_stop = text[match.end():].lstrip().startswith(".")
    if stopped_at_full_stop and ABBREVIATED_SUFFIX_PATTERN.search(name):
        name += "."
    return name


def _take_relation_years(name: str) -> tuple[str, list[str]]:
    """Move years written around a relation owner out of the name.

    ``"Foo Records 2019"`` gives ``("Foo Records", ["2019"])``.  A name that
    would be left empty keeps its text.
    """
    for pattern in (LEADING_YEARS_PATTERN, TRAILING_YEARS_PATTERN):
        match = pattern.search(name)
        if match is None:
            continue
        rest = (name[:match.start()] + name[match.end():]).strip()
        if rest:
            return rest, _split_years(match.group("years"))
    return name, []


def _find_relations(
    line: str, config: ParserConfig | None
) -> list[AttributionRecord]:
    records: list[AttributionRecord] = []
    for match in RELATION_PATTERN.finditer(line):
        types = relation_types(match.group("phrase"))
        name_span = _relation_name(line[match.end():])
        if not types or not name_span:
            logger.debug("Relation phrase %r without a name", match.group("phrase"))
            continue
        name_span, years = _take_relation_years(name_span)
        for name in _split(name_span, config):
            records.append(
                AttributionRecord(name=name, types=list(types), year=_year_value(years))
            )
    return records


# ---------------------------------------------------------------------------
# Line parsing
# ---------------------------------------------------------------------------

def _split(span: str, config: ParserConfig | None) -> list[str]:
    if config is None:
        return split_names(span)
    return split_names(
        span,
        separator=config.name_separator_pattern,
        split_regions=config.split_regions,
    )


def _parse_line(line: str, config: ParserConfig | None) -> LineResult:
    """Parse a single line into records and a completeness status."""
    text = _prepare_line(line, config)
    result = LineResult(text=line.strip())
    if not text:
        return result

    dropped = 0
    for segment in _find_segments(text):
        names = _split(segment.name_span, config)
        if not names:
            logger.debug("Dropping rights segment without a name in %r", text)
            dropped += 1
            continue
        result.records.extend(
            AttributionRecord(name=name, types=list(segment.types), year=segment.year)
            for name in names
        )

    result.records.extend(_find_relations(text, config))

    if not result.records:
        result.status = LineStatus.SKIPPED
    elif dropped:
        result.status = LineStatus.PARTIAL
    else:
        result.status = LineStatus.DONE
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_lines(text: str, config: ParserConfig | None = None) -> ParseReport:
    """Parse a notice line by line and report which lines yielded records.

    Args:
        text: One or more notices separated by line breaks.
        config: Optional parser tuning; module defaults are used when omitted.

    Returns:
        A ``ParseReport`` with one ``LineResult`` per input line.

    Raises:
        TypeError: If *text* is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected notice text as str, got {type(text).__name__}")
    return ParseReport(lines=[_parse_line(line, config) for line in text.splitlines()])


def parse_copyright_notice(
    text: str, config: ParserConfig | None = None
) -> list[AttributionRecord]:
    """Parse legal notice text into attribution records.

    Best-effort extraction: unparsable spans are dropped and an input without
    any recognisable notice yields an empty list.  Never raises for string
    input and holds no state, so identical input always gives identical
    output.

    Examples::

        parse_copyright_notice("℗ & © 2021 Universal Music New Zealand Limited")
        -> [AttributionRecord(name="Universal Music New Zealand Limited",
                              types=["℗", "©"], year="2021")]

        parse_copyright_notice("Distributed By Republic Records.")
        -> [AttributionRecord(name="Republic Records", types=["distributed by"])]
    """
    return parse_lines(text, config).records
