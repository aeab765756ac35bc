"""Text serialisation of match histories and player reports.

History file::

    <Year>
    MM-DD:Purdue(<home>)-<Opponent>(<opponent>)
    ...
    Record: <wins>W-<losses>L

Player report::

    Player: <name>
    Games: <int>
    Games Won: <int>
    Points per Game: <x.xx>
    Assists per Game: <x.xx>
    Blocks per Game: <x.xx>
    Average Minutes: <x.xx>
"""

from __future__ import annotations

from ncaa_boxscore.evaluation.reducers import MatchHistory, PlayerSummary
from ncaa_boxscore.ingest.schema import HOME_TEAM
from ncaa_boxscore.transform.matches import Match


def format_match_line(match: Match) -> str:
    return (
        f"{match.key.month:02d}-{match.key.day:02d}:"
        f"{HOME_TEAM}({match.home_score})-{match.opponent_name}({match.opponent_score})"
    )


def format_history(history: MatchHistory) -> str:
    """Render *history* as newline-terminated text."""
    lines = [str(history.year)]
    lines.extend(format_match_line(m) for m in history.matches)
    lines.append(f"Record: {history.wins}W-{history.losses}L")
    return "\n".join(lines) + "\n"


def format_player_report(summary: PlayerSummary) -> str:
    """Render *summary* with per-game averages to two decimals."""
    lines = [
        f"Player: {summary.player_name}",
        f"Games: {summary.games_played}",
        f"Games Won: {summary.games_won}",
        f"Points per Game: {summary.points_per_game:.2f}",
        f"Assists per Game: {summary.assists_per_game:.2f}",
        f"Blocks per Game: {summary.blocks_per_game:.2f}",
        f"Average Minutes: {summary.minutes_per_game:.2f}",
    ]
    return "\n".join(lines) + "\n"
