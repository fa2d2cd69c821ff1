from __future__ import annotations

from enum import StrEnum


class Outcome(StrEnum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


class MatchPolicy(StrEnum):
    STRICT = "strict"
    RELAXED = "relaxed"


class SessionStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class CharClass(StrEnum):
    DONE = "done"
    CURRENT = "current"
    PENDING = "pending"


class KeyKind(StrEnum):
    CHAR = "char"
    ABORT = "abort"
    IGNORED = "ignored"
