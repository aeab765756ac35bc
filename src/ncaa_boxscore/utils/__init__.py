"""Shared utilities module."""

from __future__ import annotations

from ncaa_boxscore.utils.logger import (
    DEBUG,
    NORMAL,
    QUIET,
    VERBOSE,
    configure_logging,
    get_logger,
)

__all__ = [
    "DEBUG",
    "NORMAL",
    "QUIET",
    "VERBOSE",
    "configure_logging",
    "get_logger",
]
