"""``lockdeps lock`` — Write a manifest with every dependency pinned.

Reads the revision checked out for each dependency under the dependency
root, pairs it with the dependency's declared spec, and writes a copy of
the project manifest whose ``deps`` are pinned to those revisions.

Settings may be given as options or as rebar-style trailing pairs::

    lockdeps lock --ignore dev_tools --keep-first core
    lockdeps lock ignore=dev_tools keep_first=core lock_config=deps.lock

Exit Codes:
    0 — Locked manifest written.
    1 — A manifest, revision, or lock error aborted the run.
    2 — Invalid command-line usage.
"""

from __future__ import annotations

from pathlib import Path

import click

from lockdeps.cli.options import (
    git_timeout_option,
    parse_settings,
    project_dir_option,
    reporting_errors,
    strict_option,
)
from lockdeps.cli.output import print_lock_summary
from lockdeps.config import ProjectConfig
from lockdeps.core.lock import LockPolicy, lock_project

_SETTINGS = {"ignore", "keep_first", "lock_config"}


@click.command("lock")
@click.argument("settings", nargs=-1)
@project_dir_option
@click.option(
    "--ignore", "-i",
    default=None,
    help="Comma-separated dependencies to pass through unlocked.",
)
@click.option(
    "--keep-first", "-k",
    default=None,
    help="Comma-separated dependencies to list first, in this order.",
)
@click.option(
    "--lock-config", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output path for the locked manifest (default: <manifest>.lock).",
)
@git_timeout_option
@strict_option
def lock_command(
    settings: tuple[str, ...],
    project_dir: str,
    ignore: str | None,
    keep_first: str | None,
    lock_config: str | None,
    git_timeout: float | None,
    strict: bool,
) -> None:
    """Lock every checked-out dependency to its current git revision.

    SETTINGS are optional ignore=..., keep_first=... and lock_config=...
    pairs, equivalent to the options of the same name.
    """
    pairs = parse_settings(settings, _SETTINGS)
    ignore = ignore if ignore is not None else pairs.get("ignore")
    keep_first = keep_first if keep_first is not None else pairs.get("keep_first")
    lock_config = lock_config if lock_config is not None else pairs.get("lock_config")

    with reporting_errors():
        policy = LockPolicy.from_strings(ignore=ignore, keep_first=keep_first)
        config = ProjectConfig.load(
            Path(project_dir),
            lock_config=Path(lock_config) if lock_config else None,
            git_timeout=git_timeout,
            strict_revisions=strict,
        )
        result = lock_project(config, policy)

    print_lock_summary(result)
    click.echo(f"\nWrote locked config to: {result.output_path}")
