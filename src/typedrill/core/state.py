from __future__ import annotations

import attrs

from typedrill.core.models.enums import CharClass, MatchPolicy, SessionStatus
from typedrill.core.models.text import PracticeText


def position_class(index: int, cursor: int) -> CharClass:
    """Visual class of the character at ``index`` for a given cursor."""
    if index < cursor:
        return CharClass.DONE
    if index == cursor:
        return CharClass.CURRENT
    return CharClass.PENDING


def _within_text(instance: SessionState, attribute: attrs.Attribute, value: int) -> None:
    if not 0 <= value <= len(instance.text):
        raise ValueError(f"Cursor {value} is outside the practice text (0..{len(instance.text)}).")


@attrs.define(slots=True)
class SessionState:
    """Progress through a practice text.

    ``text`` and ``policy`` are fixed when the session is created. ``cursor`` is
    the index of the next character to type and only moves forward through
    ``typedrill.core.engine.advance``.
    """

    text: PracticeText = attrs.field(on_setattr=attrs.setters.frozen)
    policy: MatchPolicy = attrs.field(
        default=MatchPolicy.RELAXED, converter=MatchPolicy, on_setattr=attrs.setters.frozen
    )
    cursor: int = attrs.field(default=0, validator=_within_text, on_setattr=attrs.setters.validate)

    @property
    def is_complete(self) -> bool:
        return self.cursor == len(self.text)

    @property
    def status(self) -> SessionStatus:
        return SessionStatus.COMPLETE if self.is_complete else SessionStatus.IN_PROGRESS

    @property
    def current_char(self) -> str | None:
        if self.is_complete:
            return None
        return self.text[self.cursor]

    @property
    def remaining(self) -> int:
        return len(self.text) - self.cursor
