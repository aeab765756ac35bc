"""Shared pytest fixtures for the ncaa_boxscore test suite.

``game_data`` points at ``fixtures/game_data.txt``, a small log with four
matches:

==========  ===========  ======  ========  ======
Date        Opponent     Purdue  Opponent  Result
==========  ===========  ======  ========  ======
2024-01-10  Indiana          35        28  W
2024-01-15  Michigan         42        29  W
2024-02-03  Illinois         30        35  L
2023-12-20  Iowa             25        19  W
==========  ===========  ======  ========  ======
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

_FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

SCENARIO_A_LINES: tuple[str, ...] = (
    "2024-01-10|Z. Edey,Purdue#20,3,5,28.5",
    "2024-01-10|J. Doe,Indiana#18,2,1,25.0",
)


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Provide an isolated temporary directory for test data."""
    data_dir = tmp_path / "test_data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def game_data(temp_data_dir: Path) -> Path:
    """Copy the sample log into the temp directory and return its path."""
    dest = temp_data_dir / "game_data.txt"
    shutil.copyfile(_FIXTURES_DIR / "game_data.txt", dest)
    return dest


@pytest.fixture
def write_log(temp_data_dir: Path) -> Callable[..., Path]:
    """Return a factory writing newline-terminated lines to a log file."""

    def _write(*lines: str, name: str = "log.txt") -> Path:
        path = temp_data_dir / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_a_log(write_log: Callable[..., Path]) -> Path:
    """Two-row, single-match log: Purdue 20 - Indiana 18."""
    return write_log(*SCENARIO_A_LINES)
