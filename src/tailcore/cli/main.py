"""CLI entry point for tailcore.

Invoked as::

    tailcore [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m tailcore.cli.main

Commands
--------
resolve     Print the resolved theme
scan        Print candidate class names found under one or more roots
build       Resolve and scan, then write the generator snapshot
check       Report configuration findings
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tailcore.config.model import ResolvedConfig
    from tailcore.diagnostics import Diagnostic

console = Console()
err_console = Console(stderr=True)


def _config_path(config: str | None) -> Path | None:
    """Return the explicit config path or the first one found in the cwd."""
    from tailcore.config import find_config

    if config is not None:
        return Path(config)
    return find_config(Path.cwd())


def _load_or_exit(config: str | None) -> "ResolvedConfig":
    """Load and resolve configuration, printing errors and exiting on failure."""
    from tailcore.config import parse_config, resolve_config
    from tailcore.config.loader import load_config
    from tailcore.errors import ConfigError

    path = _config_path(config)
    try:
        if path is None:
            err_console.print(
                "[yellow]Warning:[/yellow] No configuration file found; "
                "using the built-in theme and no content patterns."
            )
            return resolve_config(parse_config({}))
        return resolve_config(load_config(path))
    except ConfigError as exc:
        err_console.print(f"[red]Config error[/red] in {path or '<defaults>'}: {exc}")
        sys.exit(1)


def _severity_color(severity_name: str) -> str:
    """Map a DiagnosticSeverity name to a Rich color string."""
    colors = {
        "ERROR": "red",
        "WARNING": "yellow",
        "INFORMATION": "blue",
        "HINT": "dim",
    }
    return colors.get(severity_name, "white")


def _print_diagnostics(title: str, diagnostics: "Iterable[Diagnostic]") -> None:
    table = Table(title=title, show_lines=True)
    table.add_column("Severity", style="bold", min_width=10)
    table.add_column("Code", min_width=6)
    table.add_column("Location")
    table.add_column("Message")

    for d in diagnostics:
        color = _severity_color(d.severity.name)
        location = d.path + (f"\n[dim]pattern: {d.pattern}[/dim]" if d.pattern else "")
        table.add_row(
            f"[{color}]{d.severity.name}[/{color}]",
            d.code,
            location,
            d.message + (f"\n[dim]hint: {d.suggestion}[/dim]" if d.suggestion else ""),
        )
    err_console.print(table)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="tailcore")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Design-token resolution and content scanning for utility-CSS builds."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from tailcore import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]tailcore[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


@cli.command(name="resolve")
@click.option("--config", "-c", default=None, help="Configuration file (default: auto-detect)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--scale", default=None, help="Print only this scale")
def resolve_command(config: str | None, output_format: str, scale: str | None) -> None:
    """Print the theme after applying configuration overrides."""
    import json

    import yaml

    resolved = _load_or_exit(config)
    data = resolved.theme.to_dict()
    if scale is not None:
        if scale not in data:
            err_console.print(
                f"[red]Error:[/red] Unknown scale {scale!r}. "
                f"Available: {', '.join(sorted(data))}"
            )
            sys.exit(1)
        data = {scale: data[scale]}

    if output_format == "json":
        text = json.dumps(data, indent=2)
    else:
        text = yaml.safe_dump(data, sort_keys=False)
    console.print(Syntax(text, output_format, line_numbers=False))


# ---------------------------------------------------------------------------
# scan command
# ---------------------------------------------------------------------------


@cli.command(name="scan")
@click.argument("roots", nargs=-1, type=click.Path(exists=False))
@click.option("--config", "-c", default=None, help="Configuration file (default: auto-detect)")
@click.option(
    "--pattern",
    "-p",
    "patterns",
    multiple=True,
    help="Content glob; overrides the configured content patterns",
)
@click.option("--workers", type=int, default=None, help="File-reading threads")
def scan_command(
    roots: tuple[str, ...],
    config: str | None,
    patterns: tuple[str, ...],
    workers: int | None,
) -> None:
    """Print candidate class names found under ROOTS (default: current directory)."""
    from tailcore.scanner import ContentScanner

    if patterns:
        scanner = ContentScanner(patterns, max_workers=workers)
        result = scanner.scan(roots or (".",))
    else:
        from tailcore.pipeline import Pipeline

        result = Pipeline(_load_or_exit(config), max_workers=workers).scan(roots or (".",))

    for candidate in sorted(result.candidates):
        console.print(candidate, highlight=False, markup=False)

    if result.warnings:
        _print_diagnostics("Scan warnings", result.warnings)
    err_console.print(
        f"\n[bold]{len(result.candidates)}[/bold] candidate(s) from "
        f"[bold]{len(result.files)}[/bold] file(s)"
    )


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


@cli.command(name="build")
@click.argument("roots", nargs=-1, type=click.Path(exists=False))
@click.option("--config", "-c", default=None, help="Configuration file (default: auto-detect)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Snapshot format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.option("--workers", type=int, default=None, help="File-reading threads")
def build_command(
    roots: tuple[str, ...],
    config: str | None,
    output_format: str,
    output: str | None,
    workers: int | None,
) -> None:
    """Resolve the theme, scan ROOTS, and write the generator snapshot."""
    from tailcore.export import SnapshotSerializer
    from tailcore.pipeline import Pipeline

    pipeline = Pipeline(_load_or_exit(config), max_workers=workers)
    snapshot = pipeline.build(roots or (".",))
    if snapshot is None:
        err_console.print("[yellow]Build superseded; no snapshot written.[/yellow]")
        sys.exit(0)

    serializer = SnapshotSerializer()
    if output_format == "json":
        text = serializer.to_json(snapshot)
    else:
        text = serializer.to_yaml(snapshot)

    if snapshot.warnings:
        _print_diagnostics("Build warnings", snapshot.warnings)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        err_console.print(
            f"[green]Snapshot written to[/green] {output} "
            f"({len(snapshot.candidates)} candidate(s))"
        )
    else:
        click.echo(text)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.option("--config", "-c", default=None, help="Configuration file (default: auto-detect)")
def check_command(config: str | None) -> None:
    """Load the configuration and report findings about its theme."""
    resolved = _load_or_exit(config)
    source = resolved.source or "<defaults>"

    if not resolved.diagnostics:
        console.print(f"[green]OK[/green] {source}: no issues found")
        sys.exit(0)

    _print_diagnostics(f"Check: {source}", resolved.diagnostics)
    errors = [d for d in resolved.diagnostics if d.is_error]
    console.print(
        f"\n[bold]Summary:[/bold] {len(errors)} error(s), "
        f"{len(resolved.diagnostics) - len(errors)} warning(s)"
    )
    if errors:
        sys.exit(1)


if __name__ == "__main__":
    cli()
