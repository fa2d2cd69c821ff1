from __future__ import annotations

import attrs

from typedrill.core.models.enums import KeyKind


@attrs.frozen(slots=True)
class KeyEvent:
    """One key press as seen by the session loop."""

    kind: KeyKind
    char: str = ""

    @classmethod
    def typed(cls, char: str) -> KeyEvent:
        return cls(kind=KeyKind.CHAR, char=char)

    @classmethod
    def abort(cls) -> KeyEvent:
        return cls(kind=KeyKind.ABORT)

    @classmethod
    def ignored(cls, raw: str = "") -> KeyEvent:
        return cls(kind=KeyKind.IGNORED, char=raw)
