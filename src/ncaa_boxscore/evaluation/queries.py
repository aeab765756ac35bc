"""Public box-score queries.

Each query makes exactly one sequential pass over the input log and returns
a tagged result (:class:`Ok` or :class:`Err`) instead of raising.  Argument
checks happen before any file is opened.

File-handle ordering:

* :func:`generate_matches_history` opens the input, then truncates the
  output, then scans.  Output text is buffered and written only after the
  scan succeeds, so a late ``BAD_DATE``/``BAD_RECORD`` or a
  ``NO_DATA_POINTS`` result leaves an empty output file.
* :func:`generate_player_report` finishes scanning before it opens the
  output, so a failed scan never creates or truncates the report file.
* The statistic queries stream through :func:`scan_records`, which opens the
  log lazily once argument checks have passed.
"""

from __future__ import annotations

import contextlib
import functools
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import ParamSpec, TextIO, TypeVar

from ncaa_boxscore.evaluation import reducers
from ncaa_boxscore.evaluation.report import format_history, format_player_report
from ncaa_boxscore.evaluation.result import Err, Ok
from ncaa_boxscore.ingest.errors import BadDateError, BoxScoreError, FileWriteError, NoDataPointsError
from ncaa_boxscore.ingest.scanner import (
    ENCODING,
    ENCODING_ERRORS,
    StrPath,
    open_log,
    read_records,
    scan_records,
)
from ncaa_boxscore.ingest.schema import MatchKey, is_valid_date
from ncaa_boxscore.transform.matches import iter_matches

logger = logging.getLogger(__name__)

_P = ParamSpec("_P")
_T = TypeVar("_T")


def _as_result(func: Callable[_P, _T]) -> Callable[_P, Ok[_T] | Err]:
    """Wrap *func* so :class:`BoxScoreError` becomes :class:`Err` and values become :class:`Ok`."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Ok[_T] | Err:
        try:
            value = func(*args, **kwargs)
        except NoDataPointsError as exc:
            logger.info("%s: %s", func.__name__, exc)
            return Err(exc.code, str(exc))
        except BoxScoreError as exc:
            logger.warning("%s failed with %s: %s", func.__name__, exc.code.name, exc)
            return Err(exc.code, str(exc))
        return Ok(value)

    return wrapper


@contextlib.contextmanager
def _open_output(path: StrPath) -> Iterator[TextIO]:
    try:
        handle = open(path, "w", encoding=ENCODING, errors=ENCODING_ERRORS)  # noqa: SIM115
    except OSError as exc:
        msg = f"cannot open {Path(path)} for writing: {exc.strerror or exc}"
        raise FileWriteError(msg) from exc
    with handle:
        yield handle


def _write_text(handle: TextIO, text: str, path: StrPath) -> None:
    try:
        handle.write(text)
    except OSError as exc:
        msg = f"failed writing {Path(path)}: {exc}"
        raise FileWriteError(msg) from exc


# ---------------------------------------------------------------------------
# File-producing queries
# ---------------------------------------------------------------------------


@_as_result
def generate_matches_history(in_file: StrPath, year: int, out_file: StrPath) -> None:
    """Write the home team's matches in *year* and its win/loss record to *out_file*.

    Records from other years are skipped before match boundaries are
    detected.

    Returns:
        ``Ok(None)``, or ``Err`` with ``BAD_DATE`` (``year <= 0`` or a bad row),
        ``FILE_READ_ERR``, ``FILE_WRITE_ERR``, ``BAD_RECORD`` or
        ``NO_DATA_POINTS`` (no row in *year*).
    """
    if year <= 0:
        msg = f"year must be positive, got {year}"
        raise BadDateError(msg)

    with open_log(in_file) as source, _open_output(out_file) as sink:
        records = (r for r in read_records(source, in_file) if r.year == year)
        history = reducers.match_history(iter_matches(records), year)
        _write_text(sink, format_history(history), out_file)
    logger.info("wrote %d match(es) for %d to %s", len(history.matches), year, out_file)


@_as_result
def generate_player_report(in_file: StrPath, player_name: str, out_file: StrPath) -> None:
    """Write a per-game report for a home-team player to *out_file*.

    Returns:
        ``Ok(None)``, or ``Err`` with ``FILE_READ_ERR``, ``BAD_DATE``,
        ``BAD_RECORD``, ``NO_DATA_POINTS`` (player never appeared for the home
        team) or ``FILE_WRITE_ERR``.
    """
    with open_log(in_file) as source:
        matches = iter_matches(read_records(source, in_file), keep=reducers.home_rows_of(player_name))
        summary = reducers.summarize_player(matches, player_name)

    with _open_output(out_file) as sink:
        _write_text(sink, format_player_report(summary), out_file)
    logger.info("wrote report for %s (%d games) to %s", player_name, summary.games_played, out_file)


# ---------------------------------------------------------------------------
# Statistic queries
# ---------------------------------------------------------------------------


@_as_result
def match_most_valuable_player(in_file: StrPath, year: int, month: int, day: int) -> float:
    """Return the highest combined score among rows dated *year*-*month*-*day*."""
    if not is_valid_date(year, month, day):
        msg = f"invalid match date {year}-{month}-{day}"
        raise BadDateError(msg)
    return reducers.most_valuable_score(scan_records(in_file), MatchKey(year, month, day))


@_as_result
def average_points_player(in_file: StrPath, player_name: str) -> float:
    """Return mean points per row for *player_name* (any team)."""
    return reducers.average_points(scan_records(in_file), player_name)


@_as_result
def purdue_best_winning_match_score(in_file: StrPath, year: int, month: int) -> int:
    """Return the home score of the widest-margin home win in *year*/*month*."""
    if year <= 0 or not 1 <= month <= 12:
        msg = f"invalid year/month {year}-{month}"
        raise BadDateError(msg)
    return reducers.best_winning_score(iter_matches(scan_records(in_file)), year, month)


@_as_result
def purdue_best_month(in_file: StrPath) -> int:
    """Return the calendar month (1-12) with the best home win rate across all years."""
    return reducers.best_month(iter_matches(scan_records(in_file)))
