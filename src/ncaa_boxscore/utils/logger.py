"""Structured logging with configurable verbosity levels.

Provides project-wide logging configuration using Python's standard
`logging` module. Four verbosity levels map to standard (and one custom)
Python log levels:

    ========  ==============  =====
    Project   Python level    Value
    ========  ==============  =====
    QUIET     WARNING          30
    NORMAL    INFO             20
    VERBOSE   VERBOSE (custom) 15
    DEBUG     DEBUG            10
    ========  ==============  =====

Usage:
    Configure once at startup (the CLI does this from ``--log-level``), then
    obtain named loggers anywhere in the codebase::

        >>> from ncaa_boxscore.utils.logger import configure_logging, get_logger
        >>> configure_logging("DEBUG")
        >>> log = get_logger("ingest")
        >>> log.debug("scanning game_data.txt")

    The verbosity can also be controlled via the `NCAA_BOXSCORE_LOG_LEVEL`
    environment variable (case-insensitive).  An explicit `level` argument
    takes precedence over the environment variable, which in turn takes
    precedence over the default (`NORMAL`).
"""

from __future__ import annotations

import logging
import os
import sys

VERBOSE: int = 15
"""Custom log level between INFO and DEBUG."""

logging.addLevelName(VERBOSE, "VERBOSE")

QUIET: int = logging.WARNING
NORMAL: int = logging.INFO
DEBUG: int = logging.DEBUG

_LEVEL_MAP: dict[str, int] = {
    "QUIET": QUIET,
    "NORMAL": NORMAL,
    "VERBOSE": VERBOSE,
    "DEBUG": DEBUG,
}

_ROOT_LOGGER_NAME: str = "ncaa_boxscore"
_ENV_VAR: str = "NCAA_BOXSCORE_LOG_LEVEL"
_LOG_FORMAT: str = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the ``ncaa_boxscore`` logger hierarchy.

    Resolution order:

    1. Explicit `level` argument (if not ``None``).
    2. ``NCAA_BOXSCORE_LOG_LEVEL`` environment variable.
    3. ``"NORMAL"`` default.

    Args:
        level: One of ``"QUIET"``, ``"NORMAL"``, ``"VERBOSE"``, or
            ``"DEBUG"`` (case-insensitive).

    Raises:
        ValueError: If the resolved level name is not recognised.
    """
    resolved: str = level if level is not None else os.environ.get(_ENV_VAR, "NORMAL")
    resolved_upper = resolved.upper()

    if resolved_upper not in _LEVEL_MAP:
        msg = f"Unknown log level {resolved!r}. Valid levels: {', '.join(sorted(_LEVEL_MAP))}"
        raise ValueError(msg)

    numeric_level = _LEVEL_MAP[resolved_upper]

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)

    # Re-calls replace rather than stack handlers.
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``ncaa_boxscore`` hierarchy.

    Args:
        name: Dot-separated suffix, e.g. ``"cli"`` yields ``ncaa_boxscore.cli``.
    """
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
