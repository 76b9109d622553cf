"""Run configuration for a lockdeps invocation.

``ProjectConfig`` is an explicit, immutable bundle of everything a run
needs to know about the project on disk: where its manifest lives, where
dependencies are checked out, which sub-projects to read, where the lock
goes, and how git is invoked. It is built once per command and passed to
each component; nothing reads configuration from global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lockdeps.core.manifest import DEFAULT_DEPS_DIR, MANIFEST_FILENAME, read_manifest

LOCK_SUFFIX = ".lock"


def default_lock_path(manifest_path: Path) -> Path:
    """Return the sibling lock file for a manifest, e.g. ``deps.yaml.lock``."""
    return manifest_path.with_name(manifest_path.name + LOCK_SUFFIX)


@dataclass(frozen=True)
class ProjectConfig:
    """Resolved configuration for one run.

    Attributes:
        base_dir: Project root; relative paths resolve against it.
        manifest_path: The manifest the run reads.
        deps_dir: Dependency root holding one checkout per dependency.
        sub_dirs: Sub-project directories whose manifests declare deps.
        lock_path: Where ``lock`` writes the generated manifest.
        git_timeout: Seconds allowed per git call, or None to block.
        strict_revisions: Whether a failing revision read aborts the run.
    """

    base_dir: Path
    manifest_path: Path
    deps_dir: Path
    sub_dirs: tuple[Path, ...] = field(default_factory=tuple)
    lock_path: Path | None = None
    git_timeout: float | None = None
    strict_revisions: bool = True

    @classmethod
    def load(
        cls,
        base_dir: Path,
        manifest: Path | None = None,
        lock_config: Path | None = None,
        *,
        git_timeout: float | None = None,
        strict_revisions: bool = True,
        require_manifest: bool = True,
    ) -> ProjectConfig:
        """Build a configuration from the project's manifest.

        Args:
            base_dir: Project root.
            manifest: Manifest path; defaults to ``<base_dir>/deps.yaml``.
            lock_config: Lock output path; defaults to the manifest's
                sibling ``.lock`` file.
            git_timeout: Seconds allowed per git call.
            strict_revisions: Abort on unreadable revisions.
            require_manifest: When False, a missing manifest falls back to
                default settings instead of failing.

        Raises:
            ManifestError: If the manifest is required but missing, or
                present but malformed.
        """
        manifest_path = _resolve(base_dir, manifest) if manifest else base_dir / MANIFEST_FILENAME
        deps_dir = DEFAULT_DEPS_DIR
        sub_dirs: list[str] = []
        if require_manifest or manifest_path.is_file():
            parsed = read_manifest(manifest_path)
            deps_dir = parsed.deps_dir
            sub_dirs = parsed.sub_dirs

        return cls(
            base_dir=base_dir,
            manifest_path=manifest_path,
            deps_dir=_resolve(base_dir, Path(deps_dir)),
            sub_dirs=tuple(_resolve(base_dir, Path(d)) for d in sub_dirs),
            lock_path=(
                _resolve(base_dir, lock_config) if lock_config
                else default_lock_path(manifest_path)
            ),
            git_timeout=git_timeout,
            strict_revisions=strict_revisions,
        )


def _resolve(base_dir: Path, path: Path) -> Path:
    return path if path.is_absolute() else base_dir / path
