"""Pydantic v2 schema models for box-score log records.

A :class:`BoxScoreRecord` is one player's stat line for one match.  Matches
themselves are never stored; they are identified by the :class:`MatchKey`
date tuple shared by consecutive records.

The calendar is deliberately simplified: every month has 30 days.
"""

from __future__ import annotations

from typing import Annotated, NamedTuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

HOME_TEAM: str = "Purdue"
"""Exact (case-sensitive) team name whose rows form the home side."""

MAX_NAME_LENGTH: int = 63
"""Longest accepted player or team name."""


def _check_name_length(name: str) -> str:
    # Names may hold surrogate-escaped bytes from undecodable input.
    if not 1 <= len(name) <= MAX_NAME_LENGTH:
        msg = f"name must be 1-{MAX_NAME_LENGTH} characters, got {len(name)}"
        raise ValueError(msg)
    return name


Name = Annotated[str, AfterValidator(_check_name_length)]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return ``True`` iff ``year > 0``, ``1 <= month <= 12`` and ``1 <= day <= 30``."""
    return year > 0 and 1 <= month <= 12 and 1 <= day <= 30


class MatchKey(NamedTuple):
    """Date tuple identifying a single match."""

    year: int
    month: int
    day: int


class BoxScoreRecord(BaseModel):
    """One parsed log line."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    player_name: Name
    team_name: Name
    points: int = Field(..., ge=0)
    assists: int = Field(..., ge=0)
    blocks: int = Field(..., ge=0)
    minutes: float = Field(..., gt=0)

    @model_validator(mode="after")
    def _check_date(self) -> BoxScoreRecord:
        if not is_valid_date(self.year, self.month, self.day):
            msg = f"invalid date {self.year:04d}-{self.month:02d}-{self.day:02d}"
            raise ValueError(msg)
        return self

    @property
    def key(self) -> MatchKey:
        """The match this record belongs to."""
        return MatchKey(self.year, self.month, self.day)

    @property
    def is_home(self) -> bool:
        return self.team_name == HOME_TEAM
