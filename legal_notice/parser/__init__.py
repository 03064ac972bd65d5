"""Legal notice parser.

Parses copyright (©), phonographic-right (℗) and relation notices ("licensed
to", "marketed and distributed by", ...) into structured attribution records.

Usage::

    from legal_notice.parser import parse_copyright_notice

    for record in parse_copyright_notice("℗ & © 2021 Universal Music New Zealand Limited"):
        print(record.name, record.types, record.year)
"""

from legal_notice.parser.models import (
    AttributionRecord,
    AttributionType,
    LineResult,
    LineStatus,
    ParseReport,
)
from legal_notice.parser.extractor import parse_copyright_notice, parse_lines
from legal_notice.parser.renderer import render_notice
from legal_notice.parser.splitter import split_names

__all__ = [
    "parse_copyright_notice",
    "parse_lines",
    "render_notice",
    "split_names",
    "AttributionRecord",
    "AttributionType",
    "LineResult",
    "LineStatus",
    "ParseReport",
]
