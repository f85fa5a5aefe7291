"""
Runtime input checks for registry operations.
Callers may pass values of any type, so every check inspects the value itself.
"""
from __future__ import annotations

from typing import Any

from scoreboard.errors import InvalidArgument


def is_valid_team_name(name: Any) -> bool:
    return isinstance(name, str) and len(name) > 0


def is_natural_number(value: Any) -> bool:
    """True for non-negative ``int`` values. ``bool`` and integral floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value >= 0


def validate_teams(home_team: Any, away_team: Any) -> None:
    """Home name is checked before away name, then the pair for distinctness."""
    if not is_valid_team_name(home_team):
        raise InvalidArgument("Home team name cannot be an empty string")
    if not is_valid_team_name(away_team):
        raise InvalidArgument("Away team name cannot be an empty string")
    if home_team == away_team:
        raise InvalidArgument(
            "Home and away team names must be different", home_team, away_team
        )


def validate_scores(home_score: Any, away_score: Any) -> None:
    if not (is_natural_number(home_score) and is_natural_number(away_score)):
        raise InvalidArgument("Scores must be natural numbers")
