"""Dependency locking — pin checked-out dependencies to exact revisions.

The package is split into focused submodules:

- ``policy``: ``LockPolicy`` and operator-name validation.
- ``versions``: The version table (``RevisionEntry``,
  ``build_version_table``, ``list_versions``).
- ``merge``: Pairing the version table with declared specs
  (``merge_lock``, ``LockResult``).
- ``update``: Applying a lock to on-disk checkouts (``update_local``).
- ``pipeline``: The end-to-end ``lock_project`` operation.

All public names are re-exported here.
"""

from lockdeps.core.lock.policy import LockPolicy, parse_name_list, validate_name
from lockdeps.core.lock.versions import (
    RevisionEntry,
    build_version_table,
    list_versions,
    read_versions,
    sort_versions,
)
from lockdeps.core.lock.merge import LockResult, find_spec, lock_spec, merge_lock
from lockdeps.core.lock.update import UpdateOutcome, update_dep, update_local
from lockdeps.core.lock.pipeline import lock_project

__all__ = [
    "LockPolicy",
    "LockResult",
    "RevisionEntry",
    "UpdateOutcome",
    "build_version_table",
    "find_spec",
    "list_versions",
    "lock_project",
    "lock_spec",
    "merge_lock",
    "parse_name_list",
    "read_versions",
    "sort_versions",
    "update_dep",
    "update_local",
    "validate_name",
]
