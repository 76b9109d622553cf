"""Shared fixtures for CLI tests.

Commands read revisions through ``lockdeps.core.git.read_revision``; the
``revisions`` fixture replaces it with a lookup table so tests do not
need real repositories.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from lockdeps.core import git


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def revisions(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Patch the git revision reader; fill the returned dict per test."""
    table: dict[str, str] = {}

    def _read(directory: Path, **kwargs: Any) -> str:
        return table[directory.name]

    monkeypatch.setattr(git, "read_revision", _read)
    return table
