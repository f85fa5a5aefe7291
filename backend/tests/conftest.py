"""Shared fixtures: a registry driven by a controllable clock."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from scoreboard.registry import MatchRegistry

KICKOFF = datetime(2026, 6, 11, 19, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Returns a fixed instant until advanced."""

    def __init__(self, now: datetime = KICKOFF) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry(clock: FakeClock) -> MatchRegistry:
    return MatchRegistry(clock=clock)
