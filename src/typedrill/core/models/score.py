from __future__ import annotations

from time import perf_counter

import msgspec


class Score(msgspec.Struct):
    """Running keystroke counters for one session.

    Mutated in place by ``typedrill.core.stats.record``; ``start_time`` is a
    ``time.perf_counter`` reading captured when the struct is created and never
    changed afterwards, so elapsed time is immune to wall-clock adjustments.
    """

    start_time: float = msgspec.field(default_factory=perf_counter)
    correct_count: int = 0
    incorrect_count: int = 0
    current_streak: int = 0
    best_streak: int = 0

    @property
    def total_attempts(self) -> int:
        return self.correct_count + self.incorrect_count


class Summary(msgspec.Struct, frozen=True):
    """Immutable end-of-session report."""

    correct_count: int
    incorrect_count: int
    total_attempts: int
    accuracy_percent: float
    chars_per_second: float
    chars_per_minute: float
    best_streak: int
    elapsed_seconds: float


def summary_to_dict(summary: Summary) -> dict[str, object]:
    return msgspec.structs.asdict(summary)
