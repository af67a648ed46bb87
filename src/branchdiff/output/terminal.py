"""Rich terminal reporter — category counts, file lists, flags."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from branchdiff.report.models import ClassificationReport

_CATEGORY_STYLE = {
    "added": "green",
    "changed": "yellow",
    "deleted": "red",
    "renamed": "cyan",
    "type changed": "magenta",
}


def _flag(value: bool) -> Text:
    return Text("yes", style="bold green") if value else Text("no", style="dim")


def _files_cell(paths: Sequence[str]) -> str:
    return "\n".join(paths) if paths else "-"


def render(
    report: ClassificationReport,
    *,
    title: str = "Branch comparison",
    console: Optional[Console] = None,
) -> None:
    """Print a summary of *report* using Rich."""
    console = console or Console()

    if not report.all_files:
        console.print("[bold green]No differences between the branches.[/bold green]")
        return

    table = Table(title=title, show_lines=True, title_style="bold", border_style="dim")
    table.add_column("Category", min_width=12)
    table.add_column("Count", justify="right")
    table.add_column("Files")

    rows = (
        ("added", report.added_files),
        ("changed", report.changed_files),
        ("deleted", report.deleted_files),
        ("renamed", report.renamed_files),
        ("type changed", report.type_changed_files),
    )
    for name, paths in rows:
        table.add_row(
            Text(name, style=_CATEGORY_STYLE[name]),
            str(len(paths)),
            _files_cell(paths),
        )
    console.print(table)

    flags = Table(show_header=True, border_style="dim")
    flags.add_column("")
    for name in ("added", "changed", "deleted", "renamed"):
        flags.add_column(name, justify="center")
    flags.add_row(
        "any",
        _flag(report.any_added),
        _flag(report.any_changed),
        _flag(report.any_deleted),
        _flag(report.any_renamed),
    )
    flags.add_row(
        "only",
        _flag(report.only_added),
        _flag(report.only_changed),
        _flag(report.only_deleted),
        _flag(report.only_renamed),
    )
    console.print(flags)
    console.print(f"[dim]Files:[/dim] {report.total_files}")
