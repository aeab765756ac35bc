"""Line grammar and lazy record scanning for box-score logs.

Each line of a log has the form::

    YYYY-MM-DD|PlayerName,TeamName#Points,Assists,Blocks,Minutes

Scanning follows "read until the grammar stops matching" semantics:

* a line that does not start with a record ends the scan quietly (trailing
  garbage is treated as end of usable input);
* a line that starts with a record but carries extra text after it yields
  that record, then ends the scan;
* a record with an impossible date raises :class:`BadDateError`;
* a record with negative counts or non-positive minutes raises
  :class:`BadRecordError`.

Blank lines are skipped.  Names longer than ``MAX_NAME_LENGTH`` characters and
integers longer than ``MAX_INT_DIGITS`` digits do not match the grammar.

Logs are decoded as UTF-8 with ``surrogateescape``, so names that are not
valid UTF-8 pass through as opaque text and are written back byte for byte.
"""

from __future__ import annotations

import contextlib
import logging
import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from ncaa_boxscore.ingest.errors import BadDateError, BadRecordError, FileReadError
from ncaa_boxscore.ingest.schema import MAX_NAME_LENGTH, BoxScoreRecord, is_valid_date
from ncaa_boxscore.utils.logger import VERBOSE

logger = logging.getLogger(__name__)

StrPath = str | PathLike[str]

ENCODING: str = "utf-8"
ENCODING_ERRORS: str = "surrogateescape"

MAX_INT_DIGITS: int = 10
"""Widest integer field, matching a 32-bit ``int``."""

_INT = rf"[-+]?\d{{1,{MAX_INT_DIGITS}}}"
_REAL = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"

RECORD_PATTERN: re.Pattern[str] = re.compile(
    rf"(?P<year>{_INT})-(?P<month>{_INT})-(?P<day>{_INT})"
    rf"\|(?P<player_name>[^,]{{1,{MAX_NAME_LENGTH}}})"
    rf",(?P<team_name>[^#]{{1,{MAX_NAME_LENGTH}}})"
    rf"#(?P<points>{_INT}),(?P<assists>{_INT}),(?P<blocks>{_INT}),(?P<minutes>{_REAL})"
)


# ---------------------------------------------------------------------------
# Single-line parsing
# ---------------------------------------------------------------------------


def split_line(line: str) -> tuple[BoxScoreRecord | None, str]:
    """Parse the record at the start of *line*.

    Args:
        line: Raw line, with or without its trailing newline.

    Returns:
        ``(record, rest)`` where *rest* is whatever follows the record on the
        stripped line.  *record* is ``None`` (and *rest* the whole stripped
        line) if the line does not start with a record.

    Raises:
        BadDateError: Date fields fall outside the simplified calendar.
        BadRecordError: Counts are negative or minutes are not positive.
    """
    text = line.strip()
    match = RECORD_PATTERN.match(text)
    if match is None:
        return None, text

    year, month, day = int(match["year"]), int(match["month"]), int(match["day"])
    if not is_valid_date(year, month, day):
        msg = f"invalid date {match['year']}-{match['month']}-{match['day']}"
        raise BadDateError(msg)

    try:
        record = BoxScoreRecord(
            year=year,
            month=month,
            day=day,
            player_name=match["player_name"],
            team_name=match["team_name"],
            points=int(match["points"]),
            assists=int(match["assists"]),
            blocks=int(match["blocks"]),
            minutes=float(match["minutes"]),
        )
    except ValidationError as exc:
        msg = f"invalid record {match[0]!r}: {exc.error_count()} field error(s)"
        raise BadRecordError(msg) from exc
    return record, text[match.end() :]


def parse_line(line: str) -> BoxScoreRecord | None:
    """Return the record *line* starts with, or ``None``; see :func:`split_line`."""
    return split_line(line)[0]


def iter_records(lines: Iterable[str]) -> Iterator[BoxScoreRecord]:
    """Yield records from *lines* in order until the grammar stops matching."""
    count = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        record, rest = split_line(line)
        if record is None:
            logger.log(VERBOSE, "line %d does not match the record grammar; stopping scan", lineno)
            break
        count += 1
        yield record
        if rest:
            logger.log(VERBOSE, "line %d has trailing text %r; stopping scan", lineno, rest)
            break
    logger.debug("scanned %d record(s)", count)


# ---------------------------------------------------------------------------
# File access
# ---------------------------------------------------------------------------


@contextlib.contextmanager
def open_log(path: StrPath) -> Iterator[TextIO]:
    """Open a log for reading, translating OS failures into :class:`FileReadError`."""
    try:
        handle = open(path, encoding=ENCODING, errors=ENCODING_ERRORS)  # noqa: SIM115
    except OSError as exc:
        msg = f"cannot open {Path(path)} for reading: {exc.strerror or exc}"
        raise FileReadError(msg) from exc
    with handle:
        yield handle


def _read_lines(handle: TextIO, path: StrPath) -> Iterator[str]:
    try:
        yield from handle
    except OSError as exc:
        msg = f"failed reading {Path(path)}: {exc}"
        raise FileReadError(msg) from exc


def read_records(handle: TextIO, path: StrPath = "<stream>") -> Iterator[BoxScoreRecord]:
    """Yield records from an already-open log handle."""
    return iter_records(_read_lines(handle, path))


def scan_records(path: StrPath) -> Iterator[BoxScoreRecord]:
    """Open *path* and lazily yield its records; the file closes when iteration ends.

    Raises:
        FileReadError: The file cannot be opened or read.
        BadDateError: See :func:`parse_line`.
        BadRecordError: See :func:`parse_line`.
    """
    logger.debug("scanning %s", path)
    with open_log(path) as handle:
        yield from read_records(handle, path)
