"""Shared fixtures for lockdeps tests."""

from __future__ import annotations

import pathlib
from typing import Any, Callable

import pytest

from tests.helpers import commit_file, git_dep, run_git, write_yaml


@pytest.fixture
def make_project(tmp_path: pathlib.Path) -> Callable[..., pathlib.Path]:
    """Return a factory that lays out a project on disk.

    ``deps`` maps each checked-out dependency name to the dependency list
    its own manifest declares (None for no manifest at all).
    """

    def _make(
        root_deps: list[Any] | None = None,
        deps: dict[str, list[Any] | None] | None = None,
        extra_terms: dict[str, Any] | None = None,
    ) -> pathlib.Path:
        project = tmp_path / "project"
        project.mkdir(exist_ok=True)
        terms: dict[str, Any] = {"erl_opts": ["debug_info"], "deps": root_deps or []}
        terms.update(extra_terms or {})
        write_yaml(project / "deps.yaml", terms)
        for name, declared in (deps or {}).items():
            dep_dir = project / "deps" / name
            dep_dir.mkdir(parents=True, exist_ok=True)
            if declared is not None:
                write_yaml(dep_dir / "deps.yaml", {"deps": declared})
        return project

    return _make


@pytest.fixture
def alpha_beta_project(make_project: Callable[..., pathlib.Path]) -> pathlib.Path:
    """``alpha`` and ``beta`` checked out; ``alpha`` declares ``beta`` at tag v1."""
    return make_project(
        deps={
            "alpha": [git_dep("beta", "u1", {"tag": "v1"})],
            "beta": None,
        },
    )


@pytest.fixture
def fake_revisions() -> Callable[[dict[str, str]], Callable[[pathlib.Path], str]]:
    """Return a factory for revision readers backed by a name -> revision dict."""

    def _factory(revisions: dict[str, str]) -> Callable[[pathlib.Path], str]:
        def _read(directory: pathlib.Path) -> str:
            return revisions[directory.name]

        return _read

    return _factory


@pytest.fixture
def git_repo(tmp_path: pathlib.Path) -> Callable[..., tuple[pathlib.Path, str]]:
    """Return a factory creating a git repository with one commit.

    The factory returns ``(path, head_revision)``.
    """

    def _make(path: pathlib.Path | None = None, content: str = "v1") -> tuple[pathlib.Path, str]:
        repo = path or tmp_path / "repo"
        repo.mkdir(parents=True, exist_ok=True)
        run_git("init", "-q", cwd=repo)
        return repo, commit_file(repo, content)

    return _make
