"""``lockdeps list-versions`` — Show the revision of each dependency checkout."""

from __future__ import annotations

from pathlib import Path

import click

from lockdeps.cli.options import (
    git_timeout_option,
    project_dir_option,
    reporting_errors,
    strict_option,
)
from lockdeps.cli.output import print_versions
from lockdeps.config import ProjectConfig
from lockdeps.core.lock import list_versions
from lockdeps.core.lock.pipeline import config_reader


@click.command("list-versions")
@project_dir_option
@git_timeout_option
@strict_option
def list_versions_command(project_dir: str, git_timeout: float | None, strict: bool) -> None:
    """Print ``<revision> <name>`` for every dependency checkout.

    Works without a manifest, in which case dependencies are looked up
    under ``deps/``. With ``--no-strict`` a directory whose revision
    cannot be read is listed with whatever git printed.
    """
    with reporting_errors():
        config = ProjectConfig.load(
            Path(project_dir),
            git_timeout=git_timeout,
            strict_revisions=strict,
            require_manifest=False,
        )
        entries = list(list_versions(config.deps_dir, reader=config_reader(config)))
    print_versions(entries)
