"""branchdiff CLI — compare two GitLab branches and classify the changed files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from branchdiff import __version__

app = typer.Typer(
    name="branchdiff",
    help="Classify the files that differ between two GitLab branches.",
    add_completion=False,
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        print(f"branchdiff {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def compare(
    source_branch: str = typer.Option("", "--source-branch", help="Branch on which the changes exist."),
    target_branch: str = typer.Option("", "--target-branch", help="Branch with which to compare."),
    straight: bool = typer.Option(
        False, "--straight", help="Compare the branch tips directly instead of against their merge base."
    ),
    project_id: int = typer.Option(0, "--project-id", help="Project in which the branches reside."),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .branchdiff.toml"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json | terminal"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also write the JSON report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Compare SOURCE with TARGET and print the classified file lists as JSON."""
    from branchdiff.config.loader import ConfigurationError, load_config
    from branchdiff.gitlab.client import (
        ClientInitializationError,
        ComparisonClient,
        ComparisonError,
    )
    from branchdiff.output import json_report, terminal
    from branchdiff.output.json_report import SerializationError
    from branchdiff.report.classifier import classify

    _configure_logging(verbose)

    # --- Load config (credential first, before any network activity) ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigurationError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if output_format:
        if output_format not in ("json", "terminal"):
            console.print(f"[bold red]Invalid format:[/bold red] {output_format}")
            raise typer.Exit(code=2)
        cfg.output.format = output_format  # type: ignore[assignment]

    # --- Build client ---
    try:
        client = ComparisonClient(cfg.gitlab.token or "", cfg.gitlab.url)
    except ClientInitializationError as exc:
        console.print(f"[bold red]Failed to create client:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if verbose:
        mode = "straight" if straight else "three-dot"
        console.print(f"[dim]GitLab: {client.base_url}[/dim]")
        console.print(f"[dim]Project: {project_id}[/dim]")
        console.print(f"[dim]Comparing {source_branch} with {target_branch} ({mode})[/dim]")

    # --- Compare ---
    try:
        entries = client.compare(project_id, source_branch, target_branch, straight=straight)
    except ComparisonError as exc:
        console.print(f"[bold red]Comparison error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if verbose:
        console.print(f"[dim]Diff entries: {len(entries)}[/dim]")

    report = classify(entries)

    # --- Output ---
    try:
        report_text = json_report.render(report)
    except SerializationError as exc:
        console.print(f"[bold red]Serialization error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if cfg.output.format == "terminal":
        terminal.render(report, title=f"{source_branch} vs {target_branch}")
    else:
        print(report_text)

    if output:
        Path(output).write_text(report_text + "\n", encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")


def main() -> None:
    app()
