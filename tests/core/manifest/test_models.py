"""Tests for manifest data models: DependencySpec, SourceDescriptor, Manifest.

Validates parsing of dependency entries, schema errors, verbatim
round-tripping of untouched entries, and the manifest accessors.
"""

from __future__ import annotations

import pytest

from lockdeps.core.manifest import DependencySpec, Manifest, SourceDescriptor
from lockdeps.exceptions import ManifestError


# ===========================================================================
# DependencySpec parsing
# ===========================================================================


class TestDependencySpecParsing:
    """Validate DependencySpec.from_manifest on valid and invalid entries."""

    def test_full_mapping(self) -> None:
        """A mapping with every key populates every field."""
        entry = {
            "name": "beta",
            "version": "1.*",
            "source": {"kind": "git", "url": "u1", "ref": {"tag": "v1"}},
            "options": ["raw"],
        }
        spec = DependencySpec.from_manifest(entry)
        assert spec.name == "beta"
        assert spec.version == "1.*"
        assert spec.source == SourceDescriptor(kind="git", url="u1", ref={"tag": "v1"})
        assert spec.options == ["raw"]

    def test_bare_name(self) -> None:
        """A bare string is a name-only spec."""
        spec = DependencySpec.from_manifest("gamma")
        assert spec.name == "gamma"
        assert spec.source is None
        assert spec.version is None

    def test_source_kind_defaults_to_git(self) -> None:
        spec = DependencySpec.from_manifest({"name": "x", "source": {"url": "u"}})
        assert spec.source is not None
        assert spec.source.kind == "git"

    def test_missing_name_rejected(self) -> None:
        with pytest.raises(ManifestError, match="without a name"):
            DependencySpec.from_manifest({"version": "1"})

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ManifestError, match="unknown keys"):
            DependencySpec.from_manifest({"name": "x", "branch": "main"})

    def test_non_mapping_entry_rejected(self) -> None:
        with pytest.raises(ManifestError):
            DependencySpec.from_manifest(42)

    def test_source_without_url_rejected(self) -> None:
        with pytest.raises(ManifestError, match="url"):
            DependencySpec.from_manifest({"name": "x", "source": {"kind": "git"}})

    def test_ref_mapping_must_have_one_known_key(self) -> None:
        with pytest.raises(ManifestError, match="exactly one"):
            DependencySpec.from_manifest(
                {"name": "x", "source": {"url": "u", "ref": {"tag": "a", "branch": "b"}}}
            )


# ===========================================================================
# Pinned refs and serialization
# ===========================================================================


class TestSourceDescriptor:
    """Validate pinned detection and serialization."""

    def test_string_ref_is_pinned(self) -> None:
        assert SourceDescriptor(kind="git", url="u", ref="abc123").is_pinned

    def test_mapping_ref_is_not_pinned(self) -> None:
        assert not SourceDescriptor(kind="git", url="u", ref={"branch": "main"}).is_pinned

    def test_missing_ref_is_not_pinned(self) -> None:
        assert not SourceDescriptor(kind="git", url="u").is_pinned

    def test_numeric_ref_becomes_string(self) -> None:
        """YAML may parse an all-digit revision as an int; it is kept as text."""
        spec = DependencySpec.from_manifest({"name": "x", "source": {"url": "u", "ref": 1234}})
        assert spec.source is not None
        assert spec.source.ref == "1234"


class TestToManifest:
    """Validate that specs serialize back to manifest entries."""

    def test_parsed_spec_round_trips_verbatim(self) -> None:
        entry = {"name": "beta", "source": {"url": "u1", "ref": {"tag": "v1"}}}
        assert DependencySpec.from_manifest(entry).to_manifest() is entry

    def test_constructed_spec_builds_mapping(self) -> None:
        spec = DependencySpec(
            name="beta",
            version=".*",
            source=SourceDescriptor(kind="git", url="u1", ref="abc123"),
            options={"raw": True},
        )
        assert spec.to_manifest() == {
            "name": "beta",
            "version": ".*",
            "source": {"kind": "git", "url": "u1", "ref": "abc123"},
            "options": {"raw": True},
        }


# ===========================================================================
# Manifest accessors
# ===========================================================================


class TestManifest:
    """Validate Manifest term accessors and with_deps."""

    def test_defaults(self) -> None:
        manifest = Manifest()
        assert manifest.deps == []
        assert manifest.deps_dir == "deps"
        assert manifest.sub_dirs == []

    def test_deps_must_be_list(self) -> None:
        with pytest.raises(ManifestError):
            Manifest(terms={"deps": "beta"}).deps

    def test_sub_dirs_must_be_strings(self) -> None:
        with pytest.raises(ManifestError):
            Manifest(terms={"sub_dirs": [1, 2]}).sub_dirs

    def test_with_deps_keeps_position(self) -> None:
        manifest = Manifest(terms={"a": 1, "deps": [], "z": 2})
        new = manifest.with_deps([DependencySpec(name="x")])
        assert list(new.terms) == ["a", "deps", "z"]
        assert new.terms["deps"] == [{"name": "x"}]
        assert manifest.terms["deps"] == []

    def test_with_deps_appends_missing_key(self) -> None:
        new = Manifest(terms={"a": 1}).with_deps([])
        assert list(new.terms) == ["a", "deps"]
