"""Query reducers over box-score records and closed matches.

Every reducer consumes an iterable once and raises
:class:`~ncaa_boxscore.ingest.errors.NoDataPointsError` when nothing in the
stream satisfies its filter.  None of them touch the filesystem; file access
lives in :mod:`ncaa_boxscore.evaluation.queries`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable

from ncaa_boxscore.ingest.errors import NoDataPointsError
from ncaa_boxscore.ingest.schema import BoxScoreRecord, MatchKey
from ncaa_boxscore.transform.matches import Match

# Weights of the MVP combined score.
ASSIST_WEIGHT: float = 1.5
BLOCK_WEIGHT: float = 2.0
MINUTE_WEIGHT: float = 0.2


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class MatchHistory:
    """Closed matches of one year with the resulting win/loss record."""

    year: int
    matches: tuple[Match, ...]
    wins: int
    losses: int


@dataclasses.dataclass(frozen=True)
class MonthRecord:
    """Games and wins bucketed under one calendar month."""

    month: int
    games: int = 0
    wins: int = 0

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.games else 0.0


@dataclasses.dataclass(frozen=True)
class PlayerSummary:
    """Season-agnostic totals for a single home-team player.

    ``games_played`` counts the player's rows; ``games_won`` counts matches
    the player appeared in that the home side won.
    """

    player_name: str
    games_played: int
    games_won: int
    total_points: int
    total_assists: int
    total_blocks: int
    total_minutes: float

    @property
    def points_per_game(self) -> float:
        return self.total_points / self.games_played

    @property
    def assists_per_game(self) -> float:
        return self.total_assists / self.games_played

    @property
    def blocks_per_game(self) -> float:
        return self.total_blocks / self.games_played

    @property
    def minutes_per_game(self) -> float:
        return self.total_minutes / self.games_played


# ---------------------------------------------------------------------------
# Record-level reducers
# ---------------------------------------------------------------------------


def combined_score(record: BoxScoreRecord) -> float:
    """MVP metric: ``points + 1.5*assists + 2*blocks + 0.2*minutes``."""
    return (
        float(record.points)
        + ASSIST_WEIGHT * record.assists
        + BLOCK_WEIGHT * record.blocks
        + MINUTE_WEIGHT * record.minutes
    )


def most_valuable_score(records: Iterable[BoxScoreRecord], key: MatchKey) -> float:
    """Return the highest combined score among rows dated *key*."""
    best = max((combined_score(r) for r in records if r.key == key), default=None)
    if best is None:
        msg = f"no records on {key.year:04d}-{key.month:02d}-{key.day:02d}"
        raise NoDataPointsError(msg)
    return best


def average_points(records: Iterable[BoxScoreRecord], player_name: str) -> float:
    """Return mean points over every row whose player name equals *player_name*."""
    total = 0
    count = 0
    for record in records:
        if record.player_name == player_name:
            total += record.points
            count += 1
    if count == 0:
        msg = f"no records for player {player_name!r}"
        raise NoDataPointsError(msg)
    return total / count


# ---------------------------------------------------------------------------
# Match-level reducers
# ---------------------------------------------------------------------------


def match_history(matches: Iterable[Match], year: int) -> MatchHistory:
    """Collect *matches* (already restricted to *year*) into a win/loss history.

    A tied match counts as a loss.
    """
    closed = tuple(matches)
    if not closed:
        msg = f"no matches in {year}"
        raise NoDataPointsError(msg)
    wins = sum(1 for m in closed if m.is_win)
    return MatchHistory(year=year, matches=closed, wins=wins, losses=len(closed) - wins)


def best_winning_score(matches: Iterable[Match], year: int, month: int) -> int:
    """Return the home score of the widest-margin win in *year*/*month*.

    Ties on margin go to the higher home score; among equal pairs the first
    match wins.
    """
    best: Match | None = None
    for match in matches:
        if match.key.year != year or match.key.month != month or not match.is_win:
            continue
        if (
            best is None
            or match.margin > best.margin
            or (match.margin == best.margin and match.home_score > best.home_score)
        ):
            best = match
    if best is None:
        msg = f"no winning match in {year:04d}-{month:02d}"
        raise NoDataPointsError(msg)
    return best.home_score


def month_records(matches: Iterable[Match]) -> dict[int, MonthRecord]:
    """Bucket every match by calendar month, across all years."""
    games = [0] * 12
    wins = [0] * 12
    for match in matches:
        games[match.key.month - 1] += 1
        if match.is_win:
            wins[match.key.month - 1] += 1
    return {
        month: MonthRecord(month=month, games=games[month - 1], wins=wins[month - 1])
        for month in range(1, 13)
        if games[month - 1]
    }


def best_month(matches: Iterable[Match]) -> int:
    """Return the month with the highest win rate; the earliest month wins ties."""
    best: MonthRecord | None = None
    for record in month_records(matches).values():
        if best is None or record.win_rate > best.win_rate:
            best = record
    if best is None or best.win_rate == 0.0:
        msg = "no month with a winning match"
        raise NoDataPointsError(msg)
    return best.month


def home_rows_of(player_name: str) -> Callable[[BoxScoreRecord], bool]:
    """Return a row filter for :func:`iter_matches` selecting *player_name*'s home-team rows."""

    def _keep(record: BoxScoreRecord) -> bool:
        return record.is_home and record.player_name == player_name

    return _keep


def summarize_player(matches: Iterable[Match], player_name: str) -> PlayerSummary:
    """Total a home-team player's rows and count the matches the player won.

    Only rows retained on each match are examined, so *matches* must come from
    :func:`iter_matches` with ``keep=home_rows_of(player_name)``.
    """
    games_played = games_won = 0
    points = assists = blocks = 0
    minutes = 0.0
    for match in matches:
        rows = [r for r in match.records if r.is_home and r.player_name == player_name]
        if not rows:
            continue
        for row in rows:
            points += row.points
            assists += row.assists
            blocks += row.blocks
            minutes += row.minutes
        games_played += len(rows)
        if match.is_win:
            games_won += 1
    if games_played == 0:
        msg = f"player {player_name!r} never appeared for the home team"
        raise NoDataPointsError(msg)
    return PlayerSummary(
        player_name=player_name,
        games_played=games_played,
        games_won=games_won,
        total_points=points,
        total_assists=assists,
        total_blocks=blocks,
        total_minutes=minutes,
    )
