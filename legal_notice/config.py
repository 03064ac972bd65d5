"""Legal notice parser configuration.

Typed, validated tuning knobs for the parser.  Settings use a Pydantic v2
model so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from legal_notice.parser.splitter import DEFAULT_NAME_SEPARATOR

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Ignoring %s=%r (expected a boolean)", name, raw)
    return None


class ParserConfig(BaseModel):
    """Tuning for ``parse_copyright_notice`` and ``parse_lines``.

    The defaults reproduce the parser's built-in behaviour, so passing no
    config and passing ``ParserConfig()`` are equivalent.
    """

    name_separator: str = Field(
        default=DEFAULT_NAME_SEPARATOR,
        description="Regex splitting a name span into several names (empty disables)",
    )
    split_regions: bool = Field(
        default=True,
        description="Split 'X for the <region> and Y for the <region>' into X and Y",
    )
    normalize_hyphens: bool = Field(
        default=True, description="Map Unicode dashes to '-' before parsing"
    )

    @field_validator("name_separator")
    @classmethod
    def _compile_separator(cls, value: str) -> str:
        if value:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"Invalid regular expression {value!r}: {exc}") from exc
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def name_separator_pattern(self) -> re.Pattern[str] | None:
        """Compiled name separator, ``None`` when splitting is disabled."""
        if not self.name_separator:
            return None
        return re.compile(self.name_separator)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ParserConfig":
        """Load a previously-saved configuration from JSON.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content is invalid.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Build a ``ParserConfig`` from environment variables.

        Recognised variables (all optional):
            LEGAL_NOTICE_NAME_SEPARATOR, LEGAL_NOTICE_SPLIT_REGIONS,
            LEGAL_NOTICE_NORMALIZE_HYPHENS.

        An invalid separator pattern falls back to the default with a warning.
        """
        kwargs: dict[str, Any] = {}

        separator = os.environ.get("LEGAL_NOTICE_NAME_SEPARATOR")
        if separator is not None:
            try:
                re.compile(separator)
            except re.error as exc:
                logger.warning(
                    "Invalid LEGAL_NOTICE_NAME_SEPARATOR %r (%s), using the default",
                    separator, exc,
                )
            else:
                kwargs["name_separator"] = separator

        split_regions = _env_flag("LEGAL_NOTICE_SPLIT_REGIONS")
        if split_regions is not None:
            kwargs["split_regions"] = split_regions

        normalize = _env_flag("LEGAL_NOTICE_NORMALIZE_HYPHENS")
        if normalize is not None:
            kwargs["normalize_hyphens"] = normalize

        return cls(**kwargs)
