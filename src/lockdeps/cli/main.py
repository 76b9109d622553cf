"""lockdeps CLI — Reproducible dependency manifests from git checkouts.

Entry point for the ``lockdeps`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    lock          — Write <manifest>.lock with every dependency pinned.
    update-local  — Check out the revisions recorded in a lock.
    list-versions — Print the current revision of each dependency.

Every option can also be set through a ``LOCKDEPS_<COMMAND>_<OPTION>``
environment variable, e.g. ``LOCKDEPS_LOCK_IGNORE=dev_tools``.

Usage::

    lockdeps lock
    lockdeps lock ignore=dev_tools keep_first=core
    lockdeps lock --lock-config build/deps.lock
    lockdeps update-local
    lockdeps list-versions -C ./my-project
"""

from __future__ import annotations

import click

from lockdeps import __version__
from lockdeps.cli.lock import lock_command
from lockdeps.cli.output import configure_logging
from lockdeps.cli.update_cmd import update_local_command
from lockdeps.cli.versions_cmd import list_versions_command


@click.group(context_settings={"auto_envvar_prefix": "LOCKDEPS"})
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """lockdeps: Lock a project's dependency tree to exact git revisions.

    Records the revision checked out for every dependency so the build
    can be reproduced later, and restores checkouts from such a record.
    """
    configure_logging(verbose)


# Register all subcommands
cli.add_command(lock_command)
cli.add_command(update_local_command)
cli.add_command(list_versions_command)
