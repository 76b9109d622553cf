"""End-to-end lock of a project.

Scan the dependency root, read and order the revisions, collect every
declared spec, merge, and write the locked manifest::

    config = ProjectConfig.load(Path("."))
    result = lock_project(config, LockPolicy.from_strings(ignore="dev_tools"))
    print(result.output_path)
"""

from __future__ import annotations

import functools
import logging

from lockdeps.config import ProjectConfig, default_lock_path
from lockdeps.core import git
from lockdeps.core.lock.merge import LockResult, merge_lock
from lockdeps.core.lock.policy import LockPolicy
from lockdeps.core.lock.versions import RevisionReader, build_version_table
from lockdeps.core.manifest import rewrite_manifest
from lockdeps.core.scanner import collect_declared_deps, scan_dependency_dirs

logger = logging.getLogger(__name__)


def config_reader(config: ProjectConfig) -> RevisionReader:
    """Return a revision reader honouring the run's git settings."""
    return functools.partial(
        git.read_revision,
        timeout=config.git_timeout,
        strict=config.strict_revisions,
    )


def lock_project(
    config: ProjectConfig,
    policy: LockPolicy,
    *,
    reader: RevisionReader | None = None,
) -> LockResult:
    """Lock every checked-out dependency and write the lock manifest.

    The project's own manifest is read first, then each dependency's, then
    each sub-project's; on name clashes the earliest declaration wins.

    Args:
        config: Run configuration; ``lock_path`` receives the output.
        policy: Ignore and priority names.
        reader: Revision reader; defaults to git with the config's
            timeout and strictness.

    Returns:
        The merge result, with ``output_path`` set.

    Raises:
        ManifestError: If a manifest cannot be read or the lock written.
        RevisionError: If a revision cannot be read in strict mode.
        LockError: If a declared spec to be locked has no source.
    """
    dep_dirs = scan_dependency_dirs(config.deps_dir)
    logger.debug("Found %d dependency checkouts in %s", len(dep_dirs), config.deps_dir)

    table = build_version_table(dep_dirs, policy, reader=reader or config_reader(config))
    declared = collect_declared_deps([config.base_dir, *dep_dirs, *config.sub_dirs])
    result = merge_lock(table, declared, policy)

    output = config.lock_path or default_lock_path(config.manifest_path)
    result.output_path = rewrite_manifest(config.manifest_path, output, result.deps)
    return result
