"""``lockdeps update-local`` — Move dependency checkouts to a lock's revisions.

Reads a locked manifest (by default the lock file written by
``lockdeps lock``) and checks out each pinned revision in the matching
directory under the manifest's dependency root. Revisions missing
locally are fetched from ``origin`` once before giving up.

Exit Codes:
    0 — All pinned checkouts updated.
    1 — A manifest could not be read or a checkout failed.
"""

from __future__ import annotations

from pathlib import Path

import click

from lockdeps.cli.options import git_timeout_option, project_dir_option, reporting_errors
from lockdeps.cli.output import print_update_start, print_update_summary
from lockdeps.config import LOCK_SUFFIX, ProjectConfig
from lockdeps.core.lock import update_local
from lockdeps.core.manifest import MANIFEST_FILENAME, read_manifest


@click.command("update-local")
@project_dir_option
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Locked manifest to apply (default: <project>/deps.yaml.lock).",
)
@git_timeout_option
def update_local_command(
    project_dir: str,
    config_path: str | None,
    git_timeout: float | None,
) -> None:
    """Check out the locked revision of every dependency on disk."""
    base_dir = Path(project_dir)
    manifest = Path(config_path or MANIFEST_FILENAME + LOCK_SUFFIX)

    with reporting_errors():
        config = ProjectConfig.load(base_dir, manifest=manifest, git_timeout=git_timeout)
        deps = read_manifest(config.manifest_path).deps
        outcomes = update_local(
            deps,
            config.deps_dir,
            timeout=config.git_timeout,
            on_update=print_update_start,
        )

    print_update_summary(outcomes)
