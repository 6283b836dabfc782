"""Shared test fixtures for ppmedit.

Provides small P3 documents and a helper that writes them to a temporary
directory so individual test modules stay focused.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from ppmedit.config.settings import OutputSettings, ParserSettings, Settings

# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

TWO_BY_ONE = "P3\n2 1\n255\n10\n20\n30\n40\n50\n60\n"

TWO_BY_TWO = """P3
# a 2x2 test image
2 2
255
10 20 30   0 0 0
0 0 0      50 0 35
"""


@pytest.fixture()
def two_by_one() -> str:
    return TWO_BY_ONE


@pytest.fixture()
def two_by_two() -> str:
    return TWO_BY_TWO


@pytest.fixture()
def write_ppm(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write *text* to ``tmp_path / name`` and return the path."""

    def _write(text: str, name: str = "input.ppm") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="ascii")
        return path

    return _write


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture()
def default_settings() -> Settings:
    """Settings built from defaults only, independent of the environment."""
    return Settings(parser=ParserSettings(), output=OutputSettings())
