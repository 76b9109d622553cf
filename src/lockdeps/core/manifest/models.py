"""Manifest data models: DependencySpec, SourceDescriptor, and Manifest.

Defines the structures parsed out of a ``deps.yaml`` manifest. Dependency
specs are immutable values; locking produces a new spec rather than
editing one in place. Every model keeps the exact object it was parsed
from so that entries passed through untouched serialize back verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lockdeps.exceptions import ManifestError

# ---------------------------------------------------------------------------
# Manifest schema constants
# ---------------------------------------------------------------------------

MANIFEST_FILENAME = "deps.yaml"
DEPS_KEY = "deps"
DEPS_DIR_KEY = "deps_dir"
SUB_DIRS_KEY = "sub_dirs"
DEFAULT_DEPS_DIR = "deps"

# Constraint written into every locked spec.
ANY_VERSION = ".*"

_SPEC_KEYS = frozenset({"name", "version", "source", "options"})
_MUTABLE_REF_KINDS = frozenset({"branch", "tag", "ref"})


# ---------------------------------------------------------------------------
# SourceDescriptor: where a dependency comes from
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SourceDescriptor:
    """Version-control source of a dependency.

    Attributes:
        kind: Source tag, e.g. ``"git"``.
        url: Repository location.
        ref: Either a plain revision string (a pinned commit) or a
            single-key mapping such as ``{"tag": "v1"}`` or
            ``{"branch": "main"}`` naming a mutable reference.
    """

    kind: str
    url: str
    ref: str | dict[str, str] | None = None

    @property
    def is_pinned(self) -> bool:
        """True when ``ref`` is a concrete revision string."""
        return isinstance(self.ref, str) and bool(self.ref)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind, "url": self.url}
        if self.ref is not None:
            data["ref"] = dict(self.ref) if isinstance(self.ref, dict) else self.ref
        return data

    @classmethod
    def from_dict(cls, data: Any, dep_name: str) -> SourceDescriptor:
        if not isinstance(data, dict):
            raise ManifestError(f"Dependency {dep_name!r}: source must be a mapping")
        kind = data.get("kind", "git")
        url = data.get("url")
        if not isinstance(kind, str) or not isinstance(url, str) or not url:
            raise ManifestError(
                f"Dependency {dep_name!r}: source needs string 'kind' and 'url'"
            )
        extra = set(data) - {"kind", "url", "ref"}
        if extra:
            raise ManifestError(
                f"Dependency {dep_name!r}: unknown source keys {sorted(extra)}"
            )
        ref = data.get("ref")
        if isinstance(ref, dict):
            if len(ref) != 1 or not set(ref) <= _MUTABLE_REF_KINDS:
                raise ManifestError(
                    f"Dependency {dep_name!r}: ref mapping must have exactly one "
                    f"of {sorted(_MUTABLE_REF_KINDS)}"
                )
            ref = {str(k): str(v) for k, v in ref.items()}
        elif ref is not None:
            ref = str(ref)
        return cls(kind=kind, url=url, ref=ref)


# ---------------------------------------------------------------------------
# DependencySpec: a single declared dependency
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DependencySpec:
    """A named dependency entry as declared in a manifest.

    Attributes:
        name: Dependency identifier. Unique within one manifest, but may
            repeat across the manifests merged during collection.
        version: Opaque constraint string. Overwritten by locking.
        source: Where to fetch the dependency from, or None for a bare
            name entry.
        options: Opaque extra-options payload, carried through locking
            unchanged.
        raw: The object this spec was parsed from. Serialization emits it
            as-is, so untouched specs round-trip verbatim.
    """

    name: str
    version: str | None = None
    source: SourceDescriptor | None = None
    options: Any = None
    raw: Any = field(default=None, compare=False, repr=False)

    def to_manifest(self) -> Any:
        """Return the YAML-ready form of this spec."""
        if self.raw is not None:
            return self.raw
        data: dict[str, Any] = {"name": self.name}
        if self.version is not None:
            data["version"] = self.version
        if self.source is not None:
            data["source"] = self.source.to_dict()
        if self.options is not None:
            data["options"] = self.options
        return data

    @classmethod
    def from_manifest(cls, entry: Any) -> DependencySpec:
        """Parse one entry of a manifest's ``deps`` list.

        Raises:
            ManifestError: If the entry does not match the schema.
        """
        if isinstance(entry, str):
            return cls(name=entry, raw=entry)
        if not isinstance(entry, dict):
            raise ManifestError(f"Dependency entry must be a name or mapping: {entry!r}")
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ManifestError(f"Dependency entry without a name: {entry!r}")
        extra = set(entry) - _SPEC_KEYS
        if extra:
            raise ManifestError(f"Dependency {name!r}: unknown keys {sorted(extra)}")
        version = entry.get("version")
        source = entry.get("source")
        return cls(
            name=name,
            version=None if version is None else str(version),
            source=None if source is None else SourceDescriptor.from_dict(source, name),
            options=entry.get("options"),
            raw=entry,
        )


# ---------------------------------------------------------------------------
# Manifest: ordered top-level terms of a deps.yaml file
# ---------------------------------------------------------------------------


@dataclass
class Manifest:
    """A parsed manifest: its top-level terms in file order.

    ``terms`` keeps every key, including ones lockdeps does not know
    about, so rewriting a manifest changes nothing but ``deps``.
    """

    terms: dict[Any, Any] = field(default_factory=dict)

    @property
    def deps(self) -> list[DependencySpec]:
        entries = self.terms.get(DEPS_KEY) or []
        if not isinstance(entries, list):
            raise ManifestError(f"'{DEPS_KEY}' must be a list")
        return [DependencySpec.from_manifest(e) for e in entries]

    @property
    def deps_dir(self) -> str:
        value = self.terms.get(DEPS_DIR_KEY, DEFAULT_DEPS_DIR)
        if not isinstance(value, str) or not value:
            raise ManifestError(f"'{DEPS_DIR_KEY}' must be a non-empty string")
        return value

    @property
    def sub_dirs(self) -> list[str]:
        value = self.terms.get(SUB_DIRS_KEY) or []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ManifestError(f"'{SUB_DIRS_KEY}' must be a list of strings")
        return list(value)

    def with_deps(self, deps: list[DependencySpec]) -> Manifest:
        """Return a copy whose ``deps`` term is replaced by ``deps``.

        The term keeps its position; if the manifest has no ``deps`` key
        it is appended after the existing terms.
        """
        terms = dict(self.terms)
        terms[DEPS_KEY] = [d.to_manifest() for d in deps]
        return Manifest(terms=terms)
