"""Local updater — move on-disk checkouts to the revisions in a lock.

Each pinned dependency with a checkout under the dependency root is first
checked out without network access. If the revision is not available
locally, ``origin`` is fetched and the checkout retried once; a failure
at that point aborts the whole update.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from lockdeps.core import git
from lockdeps.core.manifest import DependencySpec
from lockdeps.exceptions import CheckoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of updating one dependency checkout."""

    name: str
    revision: str
    fetched: bool


def update_dep(
    directory: Path,
    revision: str,
    *,
    timeout: float | None = None,
) -> bool:
    """Check out ``revision`` in ``directory``, fetching if needed.

    Returns:
        True if a fetch from ``origin`` was needed.

    Raises:
        CheckoutError: If the fetch or the post-fetch checkout fails.
    """
    if git.checkout(directory, revision, timeout=timeout):
        return False
    logger.info("%s not available locally in %s; fetching", revision, directory)
    git.fetch(directory, git.DEFAULT_REMOTE, timeout=timeout)
    if not git.checkout(directory, revision, timeout=timeout):
        raise CheckoutError(f"Cannot check out {revision} in '{directory}' after fetch")
    return True


def update_local(
    deps: list[DependencySpec],
    deps_root: Path,
    *,
    timeout: float | None = None,
    on_update: Callable[[str, str], None] | None = None,
) -> list[UpdateOutcome]:
    """Apply locked revisions to the checkouts under ``deps_root``.

    Specs without a pinned revision, and specs with no checkout
    directory, are skipped.

    Args:
        deps: Dependency specs from a locked manifest.
        deps_root: Directory holding one checkout per dependency.
        timeout: Seconds allowed per git call, or None to block.
        on_update: Called with ``(name, revision)`` before each update.

    Returns:
        One outcome per updated dependency, in ``deps`` order.

    Raises:
        CheckoutError: On the first unrecoverable checkout failure.
    """
    outcomes: list[UpdateOutcome] = []
    for spec in deps:
        if spec.source is None or not spec.source.is_pinned:
            continue
        directory = deps_root / spec.name
        if not directory.is_dir():
            logger.debug("No checkout for %s at %s; skipping", spec.name, directory)
            continue
        revision = spec.source.ref
        if on_update is not None:
            on_update(spec.name, revision)
        fetched = update_dep(directory, revision, timeout=timeout)
        outcomes.append(UpdateOutcome(name=spec.name, revision=revision, fetched=fetched))
    return outcomes
