"""Helpers shared across lockdeps test modules."""

from __future__ import annotations

import pathlib
import shutil
import subprocess
from typing import Any

import pytest
import yaml

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def write_yaml(path: pathlib.Path, data: Any) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False))
    return path


def git_dep(name: str, url: str, ref: Any = None, version: str = "", **extra: Any) -> dict[str, Any]:
    """Build a manifest dependency entry with a git source."""
    source: dict[str, Any] = {"kind": "git", "url": url}
    if ref is not None:
        source["ref"] = ref
    entry: dict[str, Any] = {"name": name, "version": version, "source": source}
    entry.update(extra)
    return entry


def run_git(*args: str, cwd: pathlib.Path) -> str:
    completed = subprocess.run(
        [
            "git",
            "-c", "user.name=lockdeps-tests",
            "-c", "user.email=tests@example.invalid",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        check=True,
        text=True,
        capture_output=True,
    )
    return completed.stdout.strip()


def commit_file(repo: pathlib.Path, content: str) -> str:
    """Commit ``content`` to README in ``repo`` and return the new HEAD."""
    (repo / "README").write_text(content)
    run_git("add", "README", cwd=repo)
    run_git("commit", "-q", "-m", content, cwd=repo)
    return run_git("rev-parse", "HEAD", cwd=repo)
