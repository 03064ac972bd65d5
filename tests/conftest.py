"""Shared pytest fixtures for the legal notice test suite.

Provides reusable fixtures for:
- The literal notice corpus (notice text -> expected records)
- Temporary config files
- A clean ``LEGAL_NOTICE_*`` environment
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_notice_corpus() -> list[tuple[str, list[dict[str, Any]]]]:
    """Load ``fixtures/notices.json`` as ``(notice, expected_records)`` pairs."""
    raw = (FIXTURES_DIR / "notices.json").read_text(encoding="utf-8")
    return [(case["notice"], case["records"]) for case in json.loads(raw)]


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Run tests asking for ``notice_case`` once per corpus notice."""
    if "notice_case" in metafunc.fixturenames:
        corpus = load_notice_corpus()
        metafunc.parametrize(
            "notice_case", corpus, ids=[notice[:40] for notice, _ in corpus]
        )


# ---------------------------------------------------------------------------
# Notice text
# ---------------------------------------------------------------------------

@pytest.fixture
def notice_corpus() -> list[tuple[str, list[dict[str, Any]]]]:
    """Every notice of the regression corpus with its expected records."""
    return load_notice_corpus()


@pytest.fixture
def multi_line_notice() -> str:
    """Stacked notices: a © line, a blank line, a ℗ line and unrelated text."""
    return (
        "© «2017 The Media Champ»\n"
        "\n"
        "℗ «2003 The Media Champ»\n"
        "Recorded at Abbey Road Studios\n"
        "℗ «Under exclusive licence to Parlophone Records Limited»"
    )


@pytest.fixture
def notice_file(tmp_path: Path, multi_line_notice: str) -> Path:
    """Notice text written to a UTF-8 file."""
    path = tmp_path / "notice.txt"
    path.write_text(multi_line_notice, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all LEGAL_NOTICE_* variables for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("LEGAL_NOTICE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo ``configure_logging`` so caplog sees ``legal_notice`` records."""
    yield
    logger = logging.getLogger("legal_notice")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
