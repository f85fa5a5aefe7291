"""
Pydantic v2 domain models for the scoreboard.
Records are frozen; the registry replaces them rather than mutating in place.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


# ── Base ────────────────────────────────────────────────────────────────
class DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ── Match ───────────────────────────────────────────────────────────────
class Match(DomainModel):
    """A match in progress, identified by its ordered (home, away) pair."""
    home_team: str
    away_team: str
    home_score: int = 0
    away_score: int = 0
    start_time: datetime

    @property
    def key(self) -> tuple[str, str]:
        return (self.home_team, self.away_team)

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    @property
    def scoreline(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"
