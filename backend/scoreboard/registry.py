"""
In-memory registry of matches in progress.

The registry owns every active match, keyed by the ordered (home, away) pair.
Records are frozen pydantic models: score updates swap in a new record. Reads
hand out copies, so nothing a caller does to a returned record reaches the
registry.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager, nullcontext
from datetime import datetime, timezone
from typing import Any, Callable, Iterator, Optional

from scoreboard.config import get_settings
from scoreboard.errors import Conflict, NotFound, ScoreboardError
from scoreboard.models.domain import Match
from scoreboard.utils import metrics
from scoreboard.utils.logging import get_logger
from scoreboard.validation import validate_scores, validate_teams

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _pair_key(home_team: Any, away_team: Any) -> Optional[tuple[str, str]]:
    """Only string pairs can be active; anything else has no key."""
    if isinstance(home_team, str) and isinstance(away_team, str):
        return (home_team, away_team)
    return None


def _summary_key(match: Match) -> tuple[int, datetime]:
    return (match.total_score, match.start_time)


class MatchRegistry:
    """
    Tracks live matches and ranks them for the scoreboard summary.

    Args:
        clock: Zero-argument callable returning the current aware datetime.
            Used to stamp ``start_time`` when a match starts.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or _utcnow
        self._matches: dict[tuple[str, str], Match] = {}
        self._lock = threading.RLock()
        self._metrics_enabled = get_settings().metrics_enabled

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        key = _pair_key(*pair)
        with self._lock:
            return key is not None and key in self._matches

    @contextmanager
    def _operation(self, name: str, home_team: Any, away_team: Any) -> Iterator[None]:
        """Serialise an operation and record any rejection before re-raising it."""
        with self._lock:
            try:
                yield
            except ScoreboardError as exc:
                logger.warning(
                    "match_operation_rejected",
                    operation=name,
                    reason=exc.reason,
                    home_team=home_team,
                    away_team=away_team,
                    error=str(exc),
                )
                if self._metrics_enabled:
                    metrics.OPERATIONS_REJECTED.labels(operation=name, reason=exc.reason).inc()
                raise
            if self._metrics_enabled:
                metrics.ACTIVE_MATCHES.set(len(self._matches))

    def _require(self, home_team: str, away_team: str) -> Match:
        key = _pair_key(home_team, away_team)
        match = self._matches.get(key) if key is not None else None
        if match is None:
            raise NotFound(home_team, away_team)
        return match

    def start_match(self, home_team: str, away_team: str) -> None:
        """
        Start a match at 0-0, stamped with the current time.

        Raises:
            InvalidArgument: a team name is empty or both names are equal.
            Conflict: the same home/away pair is already in progress.
        """
        with self._operation("start", home_team, away_team):
            validate_teams(home_team, away_team)
            if (home_team, away_team) in self._matches:
                raise Conflict(home_team, away_team)
            match = Match(home_team=home_team, away_team=away_team, start_time=self._clock())
            self._matches[match.key] = match
            if self._metrics_enabled:
                metrics.MATCHES_STARTED.inc()
            logger.info(
                "match_started",
                home_team=home_team,
                away_team=away_team,
                start_time=match.start_time.isoformat(),
            )

    def update_score(
        self,
        home_team: str,
        away_team: str,
        home_score: int,
        away_score: int,
    ) -> None:
        """
        Replace the score of a match in progress.

        Scores are validated before the match is looked up, so invalid scores
        raise InvalidArgument even for a pair that is not active.

        Raises:
            InvalidArgument: either score is not a non-negative int.
            NotFound: no active match for the pair.
        """
        with self._operation("update", home_team, away_team):
            validate_scores(home_score, away_score)
            current = self._require(home_team, away_team)
            self._matches[current.key] = current.model_copy(
                update={"home_score": home_score, "away_score": away_score}
            )
            if self._metrics_enabled:
                metrics.SCORE_UPDATES.inc()
            logger.info(
                "match_score_updated",
                home_team=home_team,
                away_team=away_team,
                score=f"{home_score}-{away_score}",
            )

    def finish_match(self, home_team: str, away_team: str) -> None:
        """Remove a match from the scoreboard. Raises NotFound if it is not active."""
        with self._operation("finish", home_team, away_team):
            match = self._require(home_team, away_team)
            del self._matches[match.key]
            if self._metrics_enabled:
                metrics.MATCHES_FINISHED.inc()
            logger.info(
                "match_finished",
                home_team=home_team,
                away_team=away_team,
                final_score=f"{match.home_score}-{match.away_score}",
            )

    def get_match(self, home_team: str, away_team: str) -> Match:
        with self._operation("get", home_team, away_team):
            return self._require(home_team, away_team).model_copy()

    def get_summary(self) -> list[Match]:
        """
        Matches in progress, highest total score first.

        Equal totals are ordered by start time, most recent first. Matches
        equal on both keys keep the order in which they were started.
        """
        timer = metrics.track_latency(metrics.SUMMARY_LATENCY) if self._metrics_enabled else nullcontext()
        with self._lock, timer:
            ranked = sorted(self._matches.values(), key=_summary_key, reverse=True)
            summary = [match.model_copy() for match in ranked]
        logger.debug("summary_built", matches=len(summary))
        return summary
