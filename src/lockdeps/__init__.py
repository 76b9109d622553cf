"""lockdeps: Pin a project's checked-out dependency tree to exact git revisions."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "Apache-2.0"
