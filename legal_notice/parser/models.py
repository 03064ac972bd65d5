"""Pydantic v2 models for the legal notice parser.

Defines the attribution vocabulary, the public ``AttributionRecord`` output
unit, the transient ``NoticeSegment`` used while parsing, and the per-line
report returned by ``parse_lines``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AttributionType(str, Enum):
    """Closed vocabulary of attribution kinds appearing in ``types``."""
    COPYRIGHT = "©"
    PHONOGRAM = "℗"
    LICENSED_TO = "licensed to"
    LICENSED_FROM = "licensed from"
    DISTRIBUTED_BY = "distributed by"
    MARKETED_BY = "marketed by"

    @property
    def is_rights_symbol(self) -> bool:
        return self in (AttributionType.COPYRIGHT, AttributionType.PHONOGRAM)


class LineStatus(str, Enum):
    """How much of an input line could be turned into records."""
    DONE = "done"
    PARTIAL = "partial"
    SKIPPED = "skipped"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class AttributionRecord(BaseModel):
    """One organisation or person named in a legal notice."""
    name: str = Field(..., description="Credited organisation or person")
    types: list[AttributionType] = Field(
        ..., min_length=1, description="Attribution kinds in source order"
    )
    year: Optional[Union[str, list[str]]] = Field(
        default=None, description="Single year, ordered list of years, or absent"
    )

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("types")
    @classmethod
    def _dedupe_types(cls, value: list[AttributionType]) -> list[AttributionType]:
        return list(dict.fromkeys(value))

    @property
    def years(self) -> list[str]:
        """The year(s) as a list, empty when absent."""
        if self.year is None:
            return []
        if isinstance(self.year, str):
            return [self.year]
        return list(self.year)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with ``year`` omitted when absent."""
        return self.model_dump(mode="json", exclude_none=True)


class NoticeSegment(BaseModel):
    """Span of one line anchored by a single symbol cluster.

    Only used while parsing; the public API never returns segments.
    """
    types: list[AttributionType] = Field(default_factory=list)
    years: list[str] = Field(default_factory=list)
    name_span: str = Field(default="")
    label: Optional[str] = Field(
        default=None, description="Release label discarded in favour of the year's owner"
    )
    category: Optional[str] = Field(
        default=None, description="Legal category from skipped 'owned by' boilerplate"
    )

    @property
    def year(self) -> Optional[Union[str, list[str]]]:
        if not self.years:
            return None
        if len(self.years) == 1:
            return self.years[0]
        return list(self.years)


# ---------------------------------------------------------------------------
# Line report
# ---------------------------------------------------------------------------

class LineResult(BaseModel):
    """Records extracted from a single input line and how complete that was."""
    text: str = Field(..., description="The stripped input line")
    status: LineStatus = Field(default=LineStatus.SKIPPED)
    records: list[AttributionRecord] = Field(default_factory=list)


class ParseReport(BaseModel):
    """Line-by-line result of parsing a multi-line notice."""
    lines: list[LineResult] = Field(default_factory=list)

    @property
    def records(self) -> list[AttributionRecord]:
        """All records in source order."""
        return [record for line in self.lines for record in line.records]

    @property
    def parsed_lines(self) -> list[str]:
        """Lines that produced at least one record (including partial ones)."""
        return [line.text for line in self.lines if line.status != LineStatus.SKIPPED]

    @property
    def skipped_lines(self) -> list[str]:
        """Lines that were not fully parsed (including partial ones)."""
        return [line.text for line in self.lines if line.status != LineStatus.DONE]

    @property
    def edit_note(self) -> str:
        """Summary of the parsed lines, one per line."""
        return "\n".join(self.parsed_lines)
