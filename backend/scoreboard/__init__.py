"""
Live scoreboard for matches in progress.
Tracks start, score updates and finish of matches, and ranks them by total
score and recency for the summary view.
"""
from scoreboard.errors import Conflict, InvalidArgument, NotFound, ScoreboardError
from scoreboard.models.domain import Match
from scoreboard.registry import MatchRegistry

__all__ = [
    "Conflict",
    "InvalidArgument",
    "Match",
    "MatchRegistry",
    "NotFound",
    "ScoreboardError",
]
