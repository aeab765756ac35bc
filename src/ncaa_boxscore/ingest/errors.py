"""Result codes and the shared exception hierarchy for box-score scans.

Every failure a scan can hit maps onto exactly one :class:`ResultCode`.
Internally the failures travel as exceptions derived from
:class:`BoxScoreError`; the public query functions convert them into tagged
results at their boundary (see :mod:`ncaa_boxscore.evaluation.result`).
"""

from __future__ import annotations

import enum

# ---------------------------------------------------------------------------
# Result codes
# ---------------------------------------------------------------------------


class ResultCode(enum.IntEnum):
    """Numeric outcome codes shared by every operation."""

    SUCCESS = 0
    FILE_READ_ERR = -1
    FILE_WRITE_ERR = -2
    BAD_RECORD = -3
    BAD_DATE = -4
    NO_DATA_POINTS = -5


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------


class BoxScoreError(Exception):
    """Base exception for all box-score scan errors."""

    code: ResultCode = ResultCode.BAD_RECORD


class FileReadError(BoxScoreError):
    """Input log could not be opened or read."""

    code = ResultCode.FILE_READ_ERR


class FileWriteError(BoxScoreError):
    """Output file could not be opened for writing."""

    code = ResultCode.FILE_WRITE_ERR


class BadRecordError(BoxScoreError):
    """A record has negative counts or non-positive minutes."""

    code = ResultCode.BAD_RECORD


class BadDateError(BoxScoreError):
    """A date falls outside year > 0, month 1-12, day 1-30."""

    code = ResultCode.BAD_DATE


class NoDataPointsError(BoxScoreError):
    """The scan completed but no rows matched the query."""

    code = ResultCode.NO_DATA_POINTS
