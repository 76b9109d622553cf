"""lockdeps exception hierarchy.

All public exceptions inherit from LockDepsError, giving callers a single
base class to catch when they want to handle any lockdeps-specific failure
without swallowing unrelated errors.
"""


class LockDepsError(Exception):
    """Base exception for all lockdeps errors."""


class ManifestError(LockDepsError):
    """Raised when a manifest cannot be read, parsed, or written.

    Covers missing required manifests, malformed YAML, dependency entries
    that do not match the manifest schema, and output write failures.
    """


class PolicyError(LockDepsError):
    """Raised when operator-supplied lock policy names are invalid.

    Covers names with characters outside the identifier alphabet and
    duplicate entries in the priority list.
    """


class RevisionError(LockDepsError):
    """Raised when the revision of a working tree cannot be read.

    Only raised in strict mode; pass-through mode returns whatever the
    version-control tool printed.
    """


class LockError(LockDepsError):
    """Raised when a declared dependency cannot be locked.

    A dependency without a version-control source has no ref to pin.
    """


class CheckoutError(LockDepsError):
    """Raised when a fetch or post-fetch checkout fails.

    Aborts the local update run; dependencies after the failing one are
    not visited.
    """
