"""Query reducers, report formatting, and the public query functions."""

from __future__ import annotations

from ncaa_boxscore.evaluation.queries import (
    average_points_player,
    generate_matches_history,
    generate_player_report,
    match_most_valuable_player,
    purdue_best_month,
    purdue_best_winning_match_score,
)
from ncaa_boxscore.evaluation.reducers import (
    MatchHistory,
    MonthRecord,
    PlayerSummary,
    average_points,
    best_month,
    best_winning_score,
    combined_score,
    home_rows_of,
    match_history,
    month_records,
    most_valuable_score,
    summarize_player,
)
from ncaa_boxscore.evaluation.report import format_history, format_match_line, format_player_report
from ncaa_boxscore.evaluation.result import Err, Ok, Result, to_sentinel

__all__ = [
    "Err",
    "MatchHistory",
    "MonthRecord",
    "Ok",
    "PlayerSummary",
    "Result",
    "average_points",
    "average_points_player",
    "best_month",
    "best_winning_score",
    "combined_score",
    "format_history",
    "format_match_line",
    "format_player_report",
    "generate_matches_history",
    "generate_player_report",
    "home_rows_of",
    "match_history",
    "match_most_valuable_player",
    "month_records",
    "most_valuable_score",
    "purdue_best_month",
    "purdue_best_winning_match_score",
    "summarize_player",
    "to_sentinel",
]
