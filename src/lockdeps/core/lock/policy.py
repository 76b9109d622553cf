"""Lock policy — which dependencies to skip and which to put first.

Names arrive from the operator as free-form comma-separated text. They
are validated here, at the boundary, so the rest of the lock pipeline
only ever sees well-formed identifiers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from lockdeps.exceptions import PolicyError

_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.+-]*$")


def validate_name(name: str) -> str:
    """Return ``name`` if it is a valid dependency identifier.

    Raises:
        PolicyError: If ``name`` contains characters outside
            ``[A-Za-z0-9_.+-]`` or does not start with a letter or digit.
    """
    if not _NAME_RE.match(name):
        raise PolicyError(f"Invalid dependency name: {name!r}")
    return name


def parse_name_list(text: str | None) -> tuple[str, ...]:
    """Split a comma-separated list of dependency names.

    Surrounding whitespace is trimmed and empty items are dropped, so
    ``"a, b,,c"`` gives ``("a", "b", "c")``.

    Raises:
        PolicyError: If any item is not a valid identifier.
    """
    if not text:
        return ()
    return tuple(validate_name(item.strip()) for item in text.split(",") if item.strip())


@dataclass(frozen=True)
class LockPolicy:
    """Per-run lock configuration.

    Attributes:
        ignore_names: Dependencies passed through unlocked, in the order
            their specs appear at the front of the locked list.
        priority_names: Dependencies forced to the front of the version
            table, in this order.
    """

    ignore_names: tuple[str, ...] = ()
    priority_names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        ignore = tuple(dict.fromkeys(validate_name(n) for n in self.ignore_names))
        priority = tuple(validate_name(n) for n in self.priority_names)
        dupes = sorted({n for n in priority if priority.count(n) > 1})
        if dupes:
            raise PolicyError(f"Priority names listed more than once: {', '.join(dupes)}")
        object.__setattr__(self, "ignore_names", ignore)
        object.__setattr__(self, "priority_names", priority)

    @classmethod
    def from_strings(cls, ignore: str | None = None, keep_first: str | None = None) -> LockPolicy:
        """Build a policy from the operator's comma-separated option values."""
        return cls(
            ignore_names=parse_name_list(ignore),
            priority_names=parse_name_list(keep_first),
        )

    def is_ignored(self, name: str) -> bool:
        return name in self.ignore_names
