"""Core lockdeps components: manifests, git access, scanning, and locking."""
