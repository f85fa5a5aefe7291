"""Errors raised by the match registry."""
from __future__ import annotations

from typing import Optional


class ScoreboardError(Exception):
    """Base class for every registry failure."""

    reason = "error"

    def __init__(
        self,
        message: str,
        home_team: Optional[str] = None,
        away_team: Optional[str] = None,
    ) -> None:
        self.home_team = home_team
        self.away_team = away_team
        super().__init__(message)


class InvalidArgument(ScoreboardError, ValueError):
    """Malformed input: empty or duplicate team names, non-natural scores."""

    reason = "invalid_argument"


class Conflict(ScoreboardError):
    """Raised when a match between the same home and away team is already active."""

    reason = "conflict"

    def __init__(self, home_team: str, away_team: str) -> None:
        super().__init__(
            f"Match between {home_team} and {away_team} is already started",
            home_team,
            away_team,
        )


class NotFound(ScoreboardError, LookupError):
    """Raised when no active match exists for the given home and away team."""

    reason = "not_found"

    def __init__(self, home_team: str, away_team: str) -> None:
        super().__init__(
            f"Match between {home_team} and {away_team} not found",
            home_team,
            away_team,
        )
