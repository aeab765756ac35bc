"""Match-boundary fold over a stream of box-score records.

Consecutive records sharing a :class:`MatchKey` belong to one match.  The
fold keeps an explicit :class:`MatchState` (created fresh for every call),
and closes the live match the moment a record with a different key arrives
or the input ends.  Callers decide what closing means by consuming the
:class:`Match` summaries yielded by :func:`iter_matches`.  Rows are retained
on a summary only when the caller asks for them through a ``keep`` predicate,
so the fold holds at most one match of rows at a time.

Scoring rules:

* rows whose team name is exactly ``HOME_TEAM`` add to ``home_score``;
* every other row adds to ``opponent_score``;
* the first non-home team name seen in a match labels the opponent.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Iterator

from ncaa_boxscore.ingest.schema import BoxScoreRecord, MatchKey


@dataclasses.dataclass(frozen=True)
class Match:
    """A closed match summary.

    Attributes:
        key: Date tuple of the match.
        home_score: Sum of points on home-team rows.
        opponent_score: Sum of points on all other rows.
        opponent_name: First non-home team name seen, or ``""`` if none.
        records: Rows of this match selected by the fold's ``keep`` predicate,
            in input order.
    """

    key: MatchKey
    home_score: int
    opponent_score: int
    opponent_name: str
    records: tuple[BoxScoreRecord, ...]

    @property
    def margin(self) -> int:
        return self.home_score - self.opponent_score

    @property
    def is_win(self) -> bool:
        """Home side outscored the opponent; ties are not wins."""
        return self.home_score > self.opponent_score


@dataclasses.dataclass
class MatchState:
    """Accumulator for the currently open match."""

    key: MatchKey | None = None
    home_score: int = 0
    opponent_score: int = 0
    opponent_name: str = ""
    records: list[BoxScoreRecord] = dataclasses.field(default_factory=list)
    keep: Callable[[BoxScoreRecord], bool] | None = None

    @property
    def is_open(self) -> bool:
        return self.key is not None

    def reset(self, key: MatchKey) -> None:
        self.key = key
        self.home_score = 0
        self.opponent_score = 0
        self.opponent_name = ""
        self.records = []

    def add(self, record: BoxScoreRecord) -> None:
        if record.is_home:
            self.home_score += record.points
        else:
            self.opponent_score += record.points
            if not self.opponent_name:
                self.opponent_name = record.team_name
        if self.keep is not None and self.keep(record):
            self.records.append(record)

    def close(self) -> Match:
        if self.key is None:
            msg = "cannot close a match that was never opened"
            raise RuntimeError(msg)
        return Match(
            key=self.key,
            home_score=self.home_score,
            opponent_score=self.opponent_score,
            opponent_name=self.opponent_name,
            records=tuple(self.records),
        )


def iter_matches(
    records: Iterable[BoxScoreRecord],
    keep: Callable[[BoxScoreRecord], bool] | None = None,
) -> Iterator[Match]:
    """Fold *records* into closed matches, in input order.

    Rows for which *keep* returns ``True`` are attached to their match's
    ``records``; with no *keep*, summaries carry no rows.

    A key seen again after a different key starts a new match; keys are
    compared only against the immediately preceding record.
    """
    state = MatchState(keep=keep)
    for record in records:
        if record.key != state.key:
            if state.is_open:
                yield state.close()
            state.reset(record.key)
        state.add(record)
    if state.is_open:
        yield state.close()
