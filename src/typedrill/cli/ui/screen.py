from __future__ import annotations

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from typedrill.cli.ui.tables import render_summary
from typedrill.core.models.enums import CharClass
from typedrill.core.models.score import Summary
from typedrill.core.models.text import PracticeText
from typedrill.core.state import position_class

CHAR_STYLES: dict[CharClass, str] = {
    CharClass.DONE: "green",
    CharClass.CURRENT: "bold blue on yellow4",
    CharClass.PENDING: "red",
}
NEWLINE_MARKER = "↵"


def build_progress_text(text: PracticeText, cursor: int) -> Text:
    rendered = Text()
    for index, char in enumerate(text):
        char_class = position_class(index, cursor)
        if char == "\n":
            # Keep the line break visible when it is the next key to press.
            marker = NEWLINE_MARKER if char_class is CharClass.CURRENT else ""
            rendered.append(marker, style=CHAR_STYLES[char_class])
            rendered.append("\n")
            continue
        rendered.append(char, style=CHAR_STYLES[char_class])
    return rendered


def build_frame(text: PracticeText, cursor: int) -> Panel:
    return Panel(
        build_progress_text(text, cursor),
        title="typedrill",
        subtitle=f"{cursor}/{len(text)}  Esc to quit",
        border_style="magenta",
        padding=(1, 4),
    )


class TerminalRenderer:
    """Full-screen live view of the practice text inside a bordered frame."""

    def __init__(self, console: Console | None = None, screen: bool = True) -> None:
        self._console = console or Console()
        self._screen = screen
        self._live: Live | None = None

    @property
    def console(self) -> Console:
        return self._console

    def start(self, text: PracticeText) -> None:
        self._live = Live(
            build_frame(text, 0),
            console=self._console,
            screen=self._screen,
            auto_refresh=False,
            transient=True,
        )
        self._live.start(refresh=True)

    def update(self, text: PracticeText, cursor: int) -> None:
        if self._live is None:
            raise RuntimeError("Renderer has not been started.")
        self._live.update(build_frame(text, cursor), refresh=True)

    def stop(self) -> None:
        if self._live is None:
            return
        self._live.stop()
        self._live = None

    def show_summary(self, summary: Summary) -> None:
        render_summary(summary, self._console)
