from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from typedrill.adapters.audio.cues import build_cue_player, play_cue_safely
from typedrill.adapters.input.terminal import TerminalKeySource
from typedrill.adapters.loaders.text_loader import FileTextSource
from typedrill.cli.ui.screen import TerminalRenderer
from typedrill.core.config import TrainerConfig, load_config
from typedrill.core.engine import TypingEngine
from typedrill.core.errors import ConfigError, EmptyTextError, SessionAlreadyComplete, TextLoadError
from typedrill.core.models.enums import KeyKind
from typedrill.core.models.score import Summary
from typedrill.core.models.text import PracticeText
from typedrill.core.protocols import CuePlayer, KeySource, Renderer, TextSource
from typedrill.logging import get_logger

log = get_logger(__name__)


def resolve_config(
    console: Console,
    text: Path | None,
    camel_case: bool = False,
    mute: bool = False,
) -> TrainerConfig:
    try:
        config = load_config()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    return config.with_overrides(
        text_path=text,
        camel_case=True if camel_case else None,
        sound=False if mute else None,
    )


def load_practice_text(source: TextSource, console: Console) -> PracticeText:
    try:
        return source.load()
    except (TextLoadError, EmptyTextError) as exc:
        log.error("text_load_failed", error=str(exc))
        console.print(f"[red]Failed to load practice text: {exc}[/red]")
        raise typer.Exit(code=1) from exc


def play_session(
    engine: TypingEngine, keys: KeySource, renderer: Renderer, cues: CuePlayer
) -> bool:
    """Feed key events to the engine until completion, abort or end of input.

    Returns True when the whole text was typed.
    """
    state = engine.state
    cue_failures = 0
    renderer.start(state.text)
    try:
        for event in keys:
            if event.kind is KeyKind.ABORT:
                log.info("session_aborted", progress=f"{state.cursor}/{len(state.text)}")
                return False
            if event.kind is KeyKind.IGNORED:
                continue
            try:
                outcome = engine.submit(event.char)
            except SessionAlreadyComplete:
                log.debug("keystroke_discarded", char=event.char)
                continue
            if not play_cue_safely(cues, outcome, quiet=True):
                cue_failures += 1
            renderer.update(state.text, state.cursor)
            if engine.is_complete:
                return True
    except KeyboardInterrupt:
        log.info("session_aborted", progress=f"{state.cursor}/{len(state.text)}")
        return False
    finally:
        renderer.stop()
        if cue_failures:
            log.warning("audio_cues_dropped", count=cue_failures)
    return engine.is_complete


def run_command(
    text: Path | None,
    camel_case: bool = False,
    mute: bool = False,
    keys: KeySource | None = None,
    renderer: Renderer | None = None,
    cues: CuePlayer | None = None,
) -> Summary:
    console = Console()
    config = resolve_config(console, text, camel_case=camel_case, mute=mute)
    log.debug("run_command_start", text_path=str(config.text_path), policy=config.policy.value)
    practice = load_practice_text(FileTextSource(config.text_path), console)

    engine = TypingEngine()
    engine.start(practice, config.policy)
    keys = keys or TerminalKeySource()
    renderer = renderer or TerminalRenderer(console)
    cues = cues or build_cue_player(config)
    try:
        with keys:
            completed = play_session(engine, keys, renderer, cues)
    finally:
        cues.close()

    summary = engine.finish()
    if not completed:
        console.print("[yellow]Session ended before the text was finished.[/yellow]")
    renderer.show_summary(summary)
    return summary
