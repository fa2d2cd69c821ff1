"""Domain models for typedrill."""

from typedrill.core.models.enums import CharClass, KeyKind, MatchPolicy, Outcome, SessionStatus
from typedrill.core.models.keys import KeyEvent
from typedrill.core.models.score import Score, Summary
from typedrill.core.models.text import PracticeText

__all__ = [
    "CharClass",
    "KeyEvent",
    "KeyKind",
    "MatchPolicy",
    "Outcome",
    "PracticeText",
    "Score",
    "SessionStatus",
    "Summary",
]
