"""Streaming transforms over box-score records."""

from __future__ import annotations

from ncaa_boxscore.transform.matches import Match, MatchState, iter_matches

__all__ = [
    "Match",
    "MatchState",
    "iter_matches",
]
