"""Box-score log parsing and Purdue match statistics."""

from __future__ import annotations

from ncaa_boxscore.evaluation import (
    Err,
    Ok,
    Result,
    average_points_player,
    generate_matches_history,
    generate_player_report,
    match_most_valuable_player,
    purdue_best_month,
    purdue_best_winning_match_score,
    to_sentinel,
)
from ncaa_boxscore.ingest import ResultCode

__all__ = [
    "Err",
    "Ok",
    "Result",
    "ResultCode",
    "average_points_player",
    "generate_matches_history",
    "generate_player_report",
    "match_most_valuable_player",
    "purdue_best_month",
    "purdue_best_winning_match_score",
    "to_sentinel",
]
