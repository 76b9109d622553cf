"""Version table: the revision checked out for every on-disk dependency.

The table is keyed by directory basename, not by anything declared in a
manifest. Ordering is deterministic and independent of how the
directories were listed:

- Priority names first, in the order the policy gives them. A priority
  name with no checked-out directory produces nothing.
- Every other entry after them, sorted by name. The sort is stable, so
  equal names keep their scan order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from lockdeps.core import git
from lockdeps.core.lock.policy import LockPolicy
from lockdeps.core.scanner import scan_dependency_dirs

logger = logging.getLogger(__name__)

RevisionReader = Callable[[Path], str]


@dataclass(frozen=True)
class RevisionEntry:
    """A dependency name and the revision checked out for it."""

    name: str
    revision: str


def read_versions(
    dependency_dirs: Iterable[Path],
    reader: RevisionReader | None = None,
) -> Iterator[RevisionEntry]:
    """Lazily read the revision of each directory, in the given order."""
    read = reader or git.read_revision
    for directory in dependency_dirs:
        yield RevisionEntry(name=directory.name, revision=read(directory))


def sort_versions(
    entries: list[RevisionEntry],
    priority_names: Iterable[str] = (),
) -> list[RevisionEntry]:
    """Order a version table: priority names first, the rest by name.

    Args:
        entries: Entries in scan order.
        priority_names: Names to force to the front, in this order.

    Returns:
        A new ordered list. Priority names without an entry are dropped.
    """
    priority = list(priority_names)
    first: list[RevisionEntry] = []
    for name in priority:
        match = next((e for e in entries if e.name == name), None)
        if match is None:
            logger.debug("Priority dependency %s is not checked out; skipping", name)
            continue
        first.append(match)
    rest = [e for e in entries if e.name not in priority]
    return first + sorted(rest, key=lambda e: e.name)


def build_version_table(
    dependency_dirs: Iterable[Path],
    policy: LockPolicy,
    *,
    reader: RevisionReader | None = None,
) -> list[RevisionEntry]:
    """Read and order the revisions of all checked-out dependencies.

    Args:
        dependency_dirs: One directory per checked-out dependency.
        policy: Supplies the priority names.
        reader: Revision reader; defaults to ``git.read_revision``.

    Returns:
        The ordered version table.
    """
    entries = list(read_versions(dependency_dirs, reader))
    return sort_versions(entries, policy.priority_names)


def list_versions(
    deps_root: Path,
    *,
    reader: RevisionReader | None = None,
) -> Iterator[RevisionEntry]:
    """Yield the current revision of each dependency under ``deps_root``.

    Read-only. Entries come out in scan order, unsorted by priority.
    """
    return read_versions(scan_dependency_dirs(deps_root), reader)
