"""Box-score log ingestion: record schema, grammar, and error codes."""

from __future__ import annotations

from ncaa_boxscore.ingest.errors import (
    BadDateError,
    BadRecordError,
    BoxScoreError,
    FileReadError,
    FileWriteError,
    NoDataPointsError,
    ResultCode,
)
from ncaa_boxscore.ingest.scanner import (
    iter_records,
    open_log,
    parse_line,
    read_records,
    scan_records,
    split_line,
)
from ncaa_boxscore.ingest.schema import HOME_TEAM, MAX_NAME_LENGTH, BoxScoreRecord, MatchKey, is_valid_date

__all__ = [
    "HOME_TEAM",
    "MAX_NAME_LENGTH",
    "BadDateError",
    "BadRecordError",
    "BoxScoreError",
    "BoxScoreRecord",
    "FileReadError",
    "FileWriteError",
    "MatchKey",
    "NoDataPointsError",
    "ResultCode",
    "is_valid_date",
    "iter_records",
    "open_log",
    "parse_line",
    "read_records",
    "scan_records",
    "split_line",
]
