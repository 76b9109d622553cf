"""Lock merger — pair the version table with declared specs.

For every version-table entry the first declared spec with the same name
supplies the source details; the entry's revision replaces the spec's
ref. Names on the ignore list are passed through exactly as declared and
placed ahead of the locked specs.

Lookups that find nothing are not errors:

- A version-table entry that nobody declares is dropped (a checked-out
  directory that is not part of the dependency graph).
- An ignore name that nobody declares contributes nothing.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path

from lockdeps.core.lock.policy import LockPolicy
from lockdeps.core.lock.versions import RevisionEntry
from lockdeps.core.manifest import ANY_VERSION, DependencySpec
from lockdeps.exceptions import LockError

logger = logging.getLogger(__name__)


@dataclass
class LockResult:
    """Outcome of merging a version table with declared specs.

    Attributes:
        ignored: Specs passed through unlocked, in ignore-list order.
        locked: Newly locked specs, in version-table order.
        output_path: Where the locked manifest was written, once it is.
    """

    ignored: list[DependencySpec] = field(default_factory=list)
    locked: list[DependencySpec] = field(default_factory=list)
    output_path: Path | None = None

    @property
    def deps(self) -> list[DependencySpec]:
        """The final dependency list: ignored specs, then locked specs."""
        return self.ignored + self.locked

    @property
    def locked_count(self) -> int:
        return len(self.locked)

    @property
    def ignored_count(self) -> int:
        return len(self.ignored)


def find_spec(name: str, declared: list[DependencySpec]) -> DependencySpec | None:
    """Return the first declared spec named ``name``, or None."""
    return next((spec for spec in declared if spec.name == name), None)


def lock_spec(spec: DependencySpec, revision: str) -> DependencySpec:
    """Pin ``spec`` to ``revision``.

    The result accepts any version and points its source ref at the
    revision. Name, source kind, URL, and extra options are unchanged.

    Raises:
        LockError: If the spec has no source to pin.
    """
    if spec.source is None:
        raise LockError(f"Cannot lock {spec.name!r}: it declares no source")
    return dataclasses.replace(
        spec,
        version=ANY_VERSION,
        source=dataclasses.replace(spec.source, ref=revision),
        raw=None,
    )


def merge_lock(
    version_table: list[RevisionEntry],
    declared: list[DependencySpec],
    policy: LockPolicy,
) -> LockResult:
    """Build the locked dependency list.

    Args:
        version_table: Ordered output of ``build_version_table``.
        declared: Every declared spec, first match wins on name clashes.
        policy: Supplies the ignore names.

    Returns:
        A ``LockResult`` whose ``deps`` is the final list.

    Raises:
        LockError: If a spec that must be locked has no source.
    """
    result = LockResult()
    for entry in version_table:
        if policy.is_ignored(entry.name):
            continue
        spec = find_spec(entry.name, declared)
        if spec is None:
            logger.debug("%s is checked out but not declared; dropping", entry.name)
            continue
        result.locked.append(lock_spec(spec, entry.revision))

    for name in policy.ignore_names:
        spec = find_spec(name, declared)
        if spec is None:
            logger.debug("Ignored dependency %s is not declared; dropping", name)
            continue
        result.ignored.append(spec)

    logger.info("Locked %d deps, ignored %d deps", result.locked_count, result.ignored_count)
    return result
