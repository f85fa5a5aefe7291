"""
In-process metrics for the scoreboard.
Wraps prometheus_client; nothing is exported over HTTP.
"""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Gauge, Histogram

# ── Counters ────────────────────────────────────────────────────────────
MATCHES_STARTED = Counter(
    "sb_matches_started_total",
    "Total matches started",
)
MATCHES_FINISHED = Counter(
    "sb_matches_finished_total",
    "Total matches finished",
)
SCORE_UPDATES = Counter(
    "sb_score_updates_total",
    "Total successful score updates",
)
OPERATIONS_REJECTED = Counter(
    "sb_operations_rejected_total",
    "Registry operations rejected with an error",
    ["operation", "reason"],
)

# ── Histograms ──────────────────────────────────────────────────────────
SUMMARY_LATENCY = Histogram(
    "sb_summary_seconds",
    "Time to build a scoreboard summary",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)

# ── Gauges ──────────────────────────────────────────────────────────────
ACTIVE_MATCHES = Gauge(
    "sb_active_matches",
    "Number of matches currently in progress",
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Iterator[None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if labels:
            histogram.labels(**labels).observe(elapsed)
        else:
            histogram.observe(elapsed)
