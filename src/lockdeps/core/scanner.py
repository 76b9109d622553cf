"""Discovery of checked-out dependencies and their declared dependency specs.

Two passes over the project tree feed the lock:

1. ``scan_dependency_dirs``: every dependency checked out under the
   dependency root.
2. ``collect_declared_deps``: every dependency spec declared by the
   project, its checked-out dependencies, and its sub-projects.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lockdeps.core.manifest import MANIFEST_FILENAME, DependencySpec, read_manifest

logger = logging.getLogger(__name__)


def scan_dependency_dirs(root: Path) -> list[Path]:
    """List the immediate child directories of a dependency root.

    Hidden entries are skipped and the result is sorted by name, so two
    scans of the same tree agree. A missing root yields an empty list.

    Args:
        root: The dependency root, e.g. ``<project>/deps``.

    Returns:
        Directory paths, one per checked-out dependency.
    """
    if not root.is_dir():
        logger.debug("Dependency root %s does not exist", root)
        return []
    return sorted(
        (p for p in root.iterdir() if p.is_dir() and not p.name.startswith(".")),
        key=lambda p: p.name,
    )


def extract_deps(directory: Path) -> list[DependencySpec]:
    """Return the specs declared in ``directory``'s manifest.

    A directory without a manifest declares nothing.

    Raises:
        ManifestError: If the manifest exists but is malformed.
    """
    manifest_path = directory / MANIFEST_FILENAME
    if not manifest_path.is_file():
        return []
    return read_manifest(manifest_path).deps


def collect_declared_deps(directories: list[Path]) -> list[DependencySpec]:
    """Collect declared dependency specs across several directories.

    Specs keep the directory order they were given in, and each
    directory's own order. Duplicate names are kept; lookups downstream
    take the first match, so earlier directories win name clashes.

    Args:
        directories: Project directories to read manifests from.

    Returns:
        Flat list of all declared specs.
    """
    collected: list[DependencySpec] = []
    for directory in directories:
        deps = extract_deps(directory)
        if deps:
            logger.debug("%s declares %d deps", directory, len(deps))
        collected.extend(deps)
    return collected
