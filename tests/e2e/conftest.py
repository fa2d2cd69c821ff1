"""E2E test fixtures and utilities.

These tests exercise complete CLI workflows as a user would experience them.
"""

from __future__ import annotations

import pytest
from rich.console import Console
from typer.testing import CliRunner

from typedrill.cli.ui.tables import render_summary
from typedrill.core.models.keys import KeyEvent
from typedrill.core.models.score import Summary
from typedrill.core.models.text import PracticeText


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CliRunner for invoking commands."""
    return CliRunner()


class PlainRenderer:
    """Renderer that prints only the score table, for captured output."""

    def start(self, text: PracticeText) -> None:
        return None

    def update(self, text: PracticeText, cursor: int) -> None:
        return None

    def stop(self) -> None:
        return None

    def show_summary(self, summary: Summary) -> None:
        render_summary(summary, Console(width=100))


@pytest.fixture
def fake_terminal(monkeypatch, scripted_keys):
    """Replace the terminal key source and screen with scripted stand-ins."""

    def _install(chars: str = "", abort: bool = False):
        events = [KeyEvent.typed(char) for char in chars]
        if abort:
            events.append(KeyEvent.abort())
        keys = scripted_keys(events=events)
        monkeypatch.setattr("typedrill.cli.commands.run.TerminalKeySource", lambda: keys)
        monkeypatch.setattr(
            "typedrill.cli.commands.run.TerminalRenderer", lambda console: PlainRenderer()
        )
        return keys

    return _install
