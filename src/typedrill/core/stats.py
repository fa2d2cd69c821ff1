from __future__ import annotations

from time import perf_counter

import structlog

from typedrill.core.errors import InvalidDuration
from typedrill.core.models.enums import Outcome
from typedrill.core.models.score import Score, Summary

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def record(score: Score, outcome: Outcome) -> None:
    if outcome is Outcome.CORRECT:
        score.correct_count += 1
        score.current_streak += 1
        score.best_streak = max(score.best_streak, score.current_streak)
    else:
        score.incorrect_count += 1
        score.current_streak = 0


def elapsed_seconds(score: Score, now: float) -> float:
    """Seconds between ``score.start_time`` and ``now`` on the ``perf_counter`` clock.

    Raises:
        InvalidDuration: If the interval is zero or negative, as when ``now`` was read
            before the session started.
    """
    elapsed = now - score.start_time
    if elapsed <= 0:
        raise InvalidDuration(f"Elapsed time must be positive, got {elapsed:.6f}s.")
    return elapsed


def accuracy_percent(correct: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return correct / total * 100.0


def finalize(score: Score, now: float | None = None) -> Summary:
    """Derive the end-of-session summary without touching ``score``.

    A non-positive duration is reported as zero speed rather than failing.
    """
    if now is None:
        now = perf_counter()
    try:
        elapsed = elapsed_seconds(score, now)
    except InvalidDuration as exc:
        log.warning("invalid_duration", error=str(exc))
        elapsed = 0.0
    per_second = score.correct_count / elapsed if elapsed > 0 else 0.0
    total = score.total_attempts
    return Summary(
        correct_count=score.correct_count,
        incorrect_count=score.incorrect_count,
        total_attempts=total,
        accuracy_percent=accuracy_percent(score.correct_count, total),
        chars_per_second=per_second,
        chars_per_minute=per_second * 60,
        best_streak=score.best_streak,
        elapsed_seconds=elapsed,
    )
