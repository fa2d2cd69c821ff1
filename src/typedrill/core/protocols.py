from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType
from typing import Protocol, runtime_checkable

from typedrill.core.models.enums import Outcome
from typedrill.core.models.keys import KeyEvent
from typedrill.core.models.score import Summary
from typedrill.core.models.text import PracticeText


@runtime_checkable
class TextSource(Protocol):
    """Protocol for loading the practice text before a session starts."""

    def load(self) -> PracticeText: ...


@runtime_checkable
class KeySource(Protocol):
    """Protocol for a stream of discrete key presses, held open as a context manager."""

    def __enter__(self) -> KeySource: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    def __iter__(self) -> Iterator[KeyEvent]: ...


@runtime_checkable
class Renderer(Protocol):
    """Protocol for drawing session progress and the final score."""

    def start(self, text: PracticeText) -> None: ...

    def update(self, text: PracticeText, cursor: int) -> None: ...

    def stop(self) -> None: ...

    def show_summary(self, summary: Summary) -> None: ...


@runtime_checkable
class CuePlayer(Protocol):
    """Protocol for audible feedback on each classified keystroke."""

    def play(self, outcome: Outcome) -> None: ...

    def close(self) -> None: ...