from __future__ import annotations

from rich.console import Console
from rich.table import Table

from typedrill.core.models.score import Summary


def summary_rows(summary: Summary) -> list[tuple[str, str, str]]:
    """(label, value, style) rows in the fixed score-screen order."""
    return [
        ("Score", str(summary.correct_count), "green"),
        ("Wrong", str(summary.incorrect_count), "red"),
        ("Accuracy", f"{summary.accuracy_percent:.2f}%", "green"),
        ("Per second", f"{summary.chars_per_second:.2f}", "green"),
        ("Per minute", f"{summary.chars_per_minute:.2f}", "green"),
        ("Best streak", str(summary.best_streak), "green"),
    ]


def render_summary(summary: Summary, console: Console) -> None:
    table = Table(title="Score")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for label, value, style in summary_rows(summary):
        table.add_row(label, value, style=style)
    console.print(table)
