"""Rich output formatting helpers for the lockdeps CLI.

Keeps console formatting in one place so that the commands only decide
what to report, not how it looks.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from lockdeps.core.lock import LockResult, RevisionEntry, UpdateOutcome

console = Console()


def configure_logging(verbose: bool) -> None:
    """Route ``logging`` through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _ref_text(ref: object) -> str:
    if isinstance(ref, dict):
        return ", ".join(f"{k}={v}" for k, v in ref.items())
    return "-" if ref is None else str(ref)


def print_lock_summary(result: LockResult) -> None:
    """Print counts and a table of the locked dependency list.

    Args:
        result: Merge result from ``lock_project``.
    """
    console.print(f"Locked [bold]{result.locked_count}[/bold] deps")
    console.print(f"Ignored [bold]{result.ignored_count}[/bold] deps")
    if not result.deps:
        console.print("[dim]No dependencies to lock.[/dim]")
        return

    table = Table(title="Locked Dependencies", show_header=True, header_style="bold")
    table.add_column("Dependency", style="bold")
    table.add_column("Revision")
    table.add_column("Status", justify="center")
    for spec in result.ignored:
        ref = spec.source.ref if spec.source else None
        table.add_row(spec.name, _ref_text(ref), "[yellow]ignored[/yellow]")
    for spec in result.locked:
        table.add_row(spec.name, _ref_text(spec.source.ref), "[green]locked[/green]")
    console.print(table)


def print_versions(entries: list[RevisionEntry]) -> None:
    """Print one ``<revision> <name>`` line per checked-out dependency."""
    if not entries:
        console.print("[dim]No dependency checkouts found.[/dim]")
        return
    for entry in entries:
        click.echo(f"{entry.revision} {entry.name}")


def print_update_start(name: str, revision: str) -> None:
    click.echo(f"Updating locked {name} to {revision}...")


def print_update_summary(outcomes: list[UpdateOutcome]) -> None:
    fetched = sum(1 for o in outcomes if o.fetched)
    console.print(
        f"Updated [bold]{len(outcomes)}[/bold] deps "
        f"({fetched} needed a fetch from origin)"
    )
