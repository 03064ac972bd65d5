"""Legal notice parser.

Converts free-form copyright and phonographic-right notices, as found on
physical media and in digital release metadata, into attribution records.

Usage::

    from legal_notice import parse_copyright_notice

    records = parse_copyright_notice("℗ 2011 The Weeknd XO, Inc. Distributed By Republic Records.")
    print([record.to_dict() for record in records])
"""

from legal_notice.config import ParserConfig
from legal_notice.parser import (
    AttributionRecord,
    AttributionType,
    LineResult,
    LineStatus,
    ParseReport,
    parse_copyright_notice,
    parse_lines,
    render_notice,
    split_names,
)

__version__ = "0.1.0"

__all__ = [
    "parse_copyright_notice",
    "parse_lines",
    "render_notice",
    "split_names",
    "ParserConfig",
    "AttributionRecord",
    "AttributionType",
    "LineResult",
    "LineStatus",
    "ParseReport",
]
