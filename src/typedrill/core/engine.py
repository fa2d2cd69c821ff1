from __future__ import annotations

import structlog

from typedrill.core import stats
from typedrill.core.errors import SessionAlreadyComplete
from typedrill.core.models.enums import MatchPolicy, Outcome
from typedrill.core.models.score import Score, Summary, summary_to_dict
from typedrill.core.models.text import PracticeText
from typedrill.core.state import SessionState

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def initialize(text: PracticeText | str, policy: MatchPolicy = MatchPolicy.RELAXED) -> SessionState:
    """Create a fresh session at cursor 0.

    Raises:
        EmptyTextError: If ``text`` has no characters.
    """
    if isinstance(text, str):
        text = PracticeText(text)
    return SessionState(text=text, policy=policy, cursor=0)


def expected_char(state: SessionState) -> str | None:
    """Character the player must type next, or None once the text is done."""
    return state.current_char


def is_complete(state: SessionState) -> bool:
    return state.is_complete


def _matches(expected: str, typed: str, policy: MatchPolicy) -> bool:
    if typed == expected:
        return True
    if policy is MatchPolicy.STRICT:
        return False
    return typed == expected.lower() or typed == expected.upper()


def classify(state: SessionState, input_char: str) -> Outcome:
    """Judge a keystroke against the expected character. Never mutates ``state``."""
    expected = expected_char(state)
    if expected is None:
        raise SessionAlreadyComplete()
    if _matches(expected, input_char, state.policy):
        return Outcome.CORRECT
    return Outcome.INCORRECT


def advance(state: SessionState, outcome: Outcome) -> None:
    if state.is_complete:
        raise SessionAlreadyComplete()
    if outcome is Outcome.CORRECT:
        state.cursor += 1


class TypingEngine:
    """Drives one typing session: classify, advance and score each keystroke."""

    def __init__(self) -> None:
        self._state: SessionState | None = None
        self._score: Score | None = None

    @property
    def state(self) -> SessionState:
        if self._state is None:
            raise RuntimeError("Engine has not been started.")
        return self._state

    @property
    def score(self) -> Score:
        if self._score is None:
            raise RuntimeError("Engine has not been started.")
        return self._score

    @property
    def is_complete(self) -> bool:
        return is_complete(self.state)

    def start(self, text: PracticeText | str, policy: MatchPolicy = MatchPolicy.RELAXED) -> None:
        state = initialize(text, policy)
        self._state = state
        self._score = Score()
        log.info(
            "session_started",
            length=len(state.text),
            policy=state.policy.value,
            source=state.text.source,
        )

    def submit(self, char: str) -> Outcome:
        """Process one keystroke.

        Raises:
            SessionAlreadyComplete: If the final character was already typed.
        """
        state = self.state
        outcome = classify(state, char)
        advance(state, outcome)
        stats.record(self.score, outcome)
        log.debug(
            "keystroke_classified",
            char=char,
            outcome=outcome.value,
            progress=f"{state.cursor}/{len(state.text)}",
            streak=self.score.current_streak,
        )
        if state.is_complete:
            log.info("session_completed", attempts=self.score.total_attempts)
        return outcome

    def finish(self, now: float | None = None) -> Summary:
        summary = stats.finalize(self.score, now)
        log.info(
            "session_finished",
            status=self.state.status.value,
            **summary_to_dict(summary),
        )
        return summary
