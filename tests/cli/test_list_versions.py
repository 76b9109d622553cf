"""Tests for ``lockdeps list-versions`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from click.testing import CliRunner

from lockdeps.cli.main import cli
from lockdeps.core import git
from tests.helpers import requires_git


class TestListVersions:
    """Tests for printing checkout revisions."""

    def test_prints_revision_then_name(
        self, runner: CliRunner, alpha_beta_project: Path, revisions: dict[str, str]
    ) -> None:
        revisions.update(alpha="fff000", beta="abc123")
        result = runner.invoke(cli, ["list-versions", "-C", str(alpha_beta_project)])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["fff000 alpha", "abc123 beta"]

    def test_works_without_manifest(
        self, runner: CliRunner, tmp_path: Path, revisions: dict[str, str]
    ) -> None:
        (tmp_path / "deps" / "solo").mkdir(parents=True)
        revisions["solo"] = "1234"
        result = runner.invoke(cli, ["list-versions", "-C", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "1234 solo" in result.output

    def test_no_checkouts(self, runner: CliRunner, make_project: Callable[..., Path]) -> None:
        result = runner.invoke(cli, ["list-versions", "-C", str(make_project())])
        assert result.exit_code == 0
        assert "No dependency checkouts found" in result.output

    def test_no_strict_reaches_revision_reader(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "deps" / "solo").mkdir(parents=True)
        seen: list[dict[str, Any]] = []

        def _read(directory: Path, **kwargs: Any) -> str:
            seen.append(kwargs)
            return "1234"

        monkeypatch.setattr(git, "read_revision", _read)
        result = runner.invoke(cli, ["list-versions", "-C", str(tmp_path), "--no-strict"])
        assert result.exit_code == 0, result.output
        assert seen == [{"timeout": None, "strict": False}]


@requires_git
class TestListVersionsStrictness:
    """A stray non-repository directory under the dependency root."""

    def test_strict_by_default(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "deps" / "stray").mkdir(parents=True)
        result = runner.invoke(cli, ["list-versions", "-C", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_no_strict_lists_the_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "deps" / "stray").mkdir(parents=True)
        result = runner.invoke(cli, ["list-versions", "-C", str(tmp_path), "--no-strict"])
        assert result.exit_code == 0, result.output
        assert "stray" in result.output
