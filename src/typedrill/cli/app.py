"""CLI app with deferred heavy imports."""

from pathlib import Path

import typer

app = typer.Typer(
    name="typedrill",
    help="typedrill - Terminal typing practice",
    no_args_is_help=True,
    add_completion=False,
)


@app.command()
def run(
    text: Path | None = typer.Argument(None, help="Practice text file (default: text.txt)"),
    camel_case: bool = typer.Option(
        False, "--camel-case", help="Require exact letter case when matching keys"
    ),
    mute: bool = typer.Option(False, "--mute", help="Disable sound cues"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    from typedrill.cli.commands.run import run_command
    from typedrill.logging import configure_logging

    configure_logging(verbose=verbose)
    run_command(text=text, camel_case=camel_case, mute=mute)


@app.command()
def check(
    text: Path | None = typer.Argument(None, help="Practice text file (default: text.txt)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    from typedrill.cli.commands.check import check_command
    from typedrill.logging import configure_logging

    configure_logging(verbose=verbose)
    check_command(text=text)
