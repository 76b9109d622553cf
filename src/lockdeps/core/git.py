"""Git working-tree operations used by locking and local updates.

Every operation is one blocking ``git`` subprocess: spawned, waited on,
and its output collected before returning. ``timeout=None`` blocks until
git exits; a number bounds the call in seconds.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from lockdeps.exceptions import CheckoutError, RevisionError

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"


def _run_git(
    argv: list[str],
    cwd: Path,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    command = ["git", *argv]
    logger.debug("Running %s in %s", " ".join(command), cwd)
    return subprocess.run(
        command,
        cwd=cwd,
        check=False,
        text=True,
        capture_output=True,
        timeout=timeout,
    )


def read_revision(
    directory: Path,
    *,
    timeout: float | None = None,
    strict: bool = True,
) -> str:
    """Return the commit checked out in ``directory``.

    Args:
        directory: A git working tree.
        timeout: Seconds to wait for git, or None to block.
        strict: When True, a failing ``git rev-parse`` raises. When False,
            everything git printed, stdout followed by stderr, is returned
            as the revision, possibly an empty string.

    Returns:
        The revision id with its trailing newline removed.

    Raises:
        RevisionError: In strict mode, if git exits non-zero, times out,
            or cannot be started.
    """
    try:
        completed = _run_git(["rev-parse", "HEAD"], cwd=directory, timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as exc:
        if strict:
            raise RevisionError(f"Cannot read revision of '{directory}': {exc}") from exc
        logger.warning("Cannot read revision of %s: %s", directory, exc)
        return ""

    if completed.returncode != 0 and strict:
        raise RevisionError(
            f"git rev-parse failed in '{directory}': {completed.stderr.strip()}"
        )

    revision = completed.stdout if strict else completed.stdout + completed.stderr
    if revision.endswith("\n"):
        revision = revision[:-1]
    if completed.returncode != 0:
        logger.warning("git rev-parse failed in %s, using %r", directory, revision)
    return revision


def checkout(directory: Path, revision: str, *, timeout: float | None = None) -> bool:
    """Check out ``revision`` without touching the network.

    Returns:
        True on success. Failure is reported through the return value so
        the caller can fall back to fetching.
    """
    try:
        completed = _run_git(["checkout", "-q", revision], cwd=directory, timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("Checkout of %s in %s failed: %s", revision, directory, exc)
        return False
    if completed.returncode != 0:
        logger.debug(
            "Checkout of %s in %s failed: %s",
            revision, directory, completed.stderr.strip(),
        )
        return False
    return True


def fetch(
    directory: Path,
    remote: str = DEFAULT_REMOTE,
    *,
    timeout: float | None = None,
) -> None:
    """Fetch ``remote`` into the repository at ``directory``.

    Raises:
        CheckoutError: If the fetch fails or times out.
    """
    try:
        completed = _run_git(["fetch", remote], cwd=directory, timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise CheckoutError(f"git fetch {remote} failed in '{directory}': {exc}") from exc
    if completed.returncode != 0:
        raise CheckoutError(
            f"git fetch {remote} failed in '{directory}': {completed.stderr.strip()}"
        )
