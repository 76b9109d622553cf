"""Project manifests — the ``deps.yaml`` configuration file.

The package is split into focused submodules:

- ``models``: Data classes (``DependencySpec``, ``SourceDescriptor``,
  ``Manifest``) and the manifest schema constants.
- ``io``: Reading manifests from disk and writing generated lock
  manifests (``read_manifest``, ``rewrite_manifest``).

All public names are re-exported here.
"""

from lockdeps.core.manifest.models import (
    ANY_VERSION,
    DEFAULT_DEPS_DIR,
    DEPS_KEY,
    MANIFEST_FILENAME,
    DependencySpec,
    Manifest,
    SourceDescriptor,
)
from lockdeps.core.manifest.io import (
    GENERATED_HEADER,
    dump_manifest,
    read_manifest,
    rewrite_manifest,
    write_manifest,
)

__all__ = [
    "ANY_VERSION",
    "DEFAULT_DEPS_DIR",
    "DEPS_KEY",
    "GENERATED_HEADER",
    "MANIFEST_FILENAME",
    "DependencySpec",
    "Manifest",
    "SourceDescriptor",
    "dump_manifest",
    "read_manifest",
    "rewrite_manifest",
    "write_manifest",
]
