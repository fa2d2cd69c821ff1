from __future__ import annotations

from pathlib import Path

from rich.console import Console

from typedrill.adapters.loaders.text_loader import FileTextSource
from typedrill.cli.commands.run import load_practice_text, resolve_config


def check_command(text: Path | None) -> None:
    console = Console()
    config = resolve_config(console, text)
    practice = load_practice_text(FileTextSource(config.text_path), console)
    console.print("[green]Practice text is valid.[/green]")
    console.print(f"[bold]File:[/bold] {config.text_path}")
    console.print(f"[bold]Characters:[/bold] {len(practice)}")
    console.print(f"[bold]Lines:[/bold] {practice.line_count}")
    console.print(f"[bold]Matching:[/bold] {config.policy.value}")
