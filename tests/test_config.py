"""Unit tests for ParserConfig (legal_notice.config).

Tests cover:
- Defaults and the compiled separator
- Validation of the separator regex
- save/load round trip
- from_env, including invalid values
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from legal_notice.config import ParserConfig
from legal_notice.parser.splitter import DEFAULT_NAME_SEPARATOR


# ---------------------------------------------------------------------------
# Defaults and validation
# ---------------------------------------------------------------------------


class TestParserConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = ParserConfig()
        assert config.name_separator == DEFAULT_NAME_SEPARATOR
        assert config.split_regions is True
        assert config.normalize_hyphens is True

    @pytest.mark.unit
    def test_separator_pattern_is_compiled(self):
        pattern = ParserConfig(name_separator=r"\s*\+\s*").name_separator_pattern
        assert pattern is not None
        assert pattern.split("Foo + Bar") == ["Foo", "Bar"]

    @pytest.mark.unit
    def test_empty_separator_disables_splitting(self):
        assert ParserConfig(name_separator="").name_separator_pattern is None

    @pytest.mark.unit
    def test_invalid_separator_rejected(self):
        with pytest.raises(ValidationError):
            ParserConfig(name_separator="(unclosed")

    @pytest.mark.unit
    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError):
            ParserConfig(split_regions="sometimes")


# ---------------------------------------------------------------------------
# save / load
# ---------------------------------------------------------------------------


class TestParserConfigPersistence:
    @pytest.mark.unit
    def test_save_creates_parents(self, tmp_path: Path):
        target = tmp_path / "nested" / "config.json"
        written = ParserConfig().save(target)
        assert written == target
        assert target.exists()

    @pytest.mark.unit
    def test_save_writes_json(self, tmp_path: Path):
        target = ParserConfig(split_regions=False).save(tmp_path / "config.json")
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["split_regions"] is False

    @pytest.mark.unit
    def test_round_trip(self, tmp_path: Path):
        original = ParserConfig(name_separator=r"\s*;\s*", normalize_hyphens=False)
        loaded = ParserConfig.load(original.save(tmp_path / "config.json"))
        assert loaded == original

    @pytest.mark.unit
    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ParserConfig.load(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_load_invalid_content(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"name_separator": "[a-"}', encoding="utf-8")
        with pytest.raises(ValidationError):
            ParserConfig.load(path)


# ---------------------------------------------------------------------------
# from_env
# ---------------------------------------------------------------------------


class TestParserConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env_gives_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert ParserConfig.from_env() == ParserConfig()

    @pytest.mark.unit
    def test_separator_from_env(self):
        env = {"LEGAL_NOTICE_NAME_SEPARATOR": r"\s*\+\s*"}
        with patch.dict(os.environ, env, clear=True):
            assert ParserConfig.from_env().name_separator == r"\s*\+\s*"

    @pytest.mark.unit
    def test_invalid_separator_falls_back(self, caplog):
        env = {"LEGAL_NOTICE_NAME_SEPARATOR": "(unclosed"}
        with patch.dict(os.environ, env, clear=True), caplog.at_level(logging.WARNING):
            config = ParserConfig.from_env()
        assert config.name_separator == DEFAULT_NAME_SEPARATOR
        assert "LEGAL_NOTICE_NAME_SEPARATOR" in caplog.text

    @pytest.mark.unit
    @pytest.mark.parametrize("raw,expected", [
        ("false", False),
        ("0", False),
        ("No", False),
        ("true", True),
        ("on", True),
    ])
    def test_split_regions_flag(self, raw, expected):
        with patch.dict(os.environ, {"LEGAL_NOTICE_SPLIT_REGIONS": raw}, clear=True):
            assert ParserConfig.from_env().split_regions is expected

    @pytest.mark.unit
    def test_normalize_hyphens_flag(self):
        with patch.dict(os.environ, {"LEGAL_NOTICE_NORMALIZE_HYPHENS": "off"}, clear=True):
            assert ParserConfig.from_env().normalize_hyphens is False

    @pytest.mark.unit
    def test_unrecognised_flag_is_ignored(self, caplog):
        env = {"LEGAL_NOTICE_SPLIT_REGIONS": "maybe"}
        with patch.dict(os.environ, env, clear=True), caplog.at_level(logging.WARNING):
            config = ParserConfig.from_env()
        assert config.split_regions is True
        assert "LEGAL_NOTICE_SPLIT_REGIONS" in caplog.text
