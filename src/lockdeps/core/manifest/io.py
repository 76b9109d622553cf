"""Manifest reading and rewriting.

Reads ``deps.yaml`` files into ordered ``Manifest`` objects and writes
generated lock manifests. Output is deterministic: terms are emitted in
their original order, one YAML block per term, with no timestamps, so
locking an unchanged checkout twice yields byte-identical files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from lockdeps.core.manifest.models import DependencySpec, Manifest
from lockdeps.exceptions import ManifestError

logger = logging.getLogger(__name__)

GENERATED_HEADER = "# THIS FILE IS GENERATED. EDIT WITH CAUTION #"


def read_manifest(path: Path) -> Manifest:
    """Read and parse a manifest from disk.

    An empty file is treated as a manifest with no terms.

    Args:
        path: Path to a ``deps.yaml`` file.

    Returns:
        The parsed ``Manifest``.

    Raises:
        ManifestError: If the file cannot be read, is not valid YAML, or
            its top level is not a mapping.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid YAML in manifest '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest '{path}' must contain a mapping of terms")
    return Manifest(terms=dict(data))


def dump_manifest(manifest: Manifest) -> str:
    """Serialize a manifest with the generated-file header.

    Each top-level term becomes its own YAML block, and the text ends
    with a blank line.
    """
    lines = [GENERATED_HEADER, ""]
    for key, value in manifest.terms.items():
        lines.append(
            yaml.safe_dump(
                {key: value},
                sort_keys=False,
                default_flow_style=False,
                allow_unicode=True,
            ).rstrip("\n")
        )
    return "\n".join(lines) + "\n\n"


def write_manifest(manifest: Manifest, path: Path) -> None:
    """Write a generated manifest to ``path``.

    Creates parent directories if they do not exist.

    Raises:
        ManifestError: If the file cannot be written.
    """
    text = dump_manifest(manifest)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise ManifestError(f"Cannot write manifest '{path}': {exc}") from exc


def rewrite_manifest(
    original: Path,
    output: Path,
    locked_deps: list[DependencySpec],
) -> Path:
    """Write a copy of ``original`` whose ``deps`` are ``locked_deps``.

    Every other top-level term is carried over unchanged and in order.

    Args:
        original: The project manifest to start from.
        output: Where the generated manifest is written.
        locked_deps: Replacement dependency list.

    Returns:
        The output path.

    Raises:
        ManifestError: On any read, parse, or write failure.
    """
    manifest = read_manifest(original)
    write_manifest(manifest.with_deps(locked_deps), output)
    logger.debug("Rewrote %s -> %s (%d deps)", original, output, len(locked_deps))
    return output
