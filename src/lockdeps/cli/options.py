"""Options and error handling shared by the lockdeps subcommands."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import click

from lockdeps.exceptions import LockDepsError

F = TypeVar("F", bound=Callable[..., Any])


def project_dir_option(func: F) -> F:
    return click.option(
        "--project-dir", "-C",
        type=click.Path(exists=True, file_okay=False, path_type=str),
        default=".",
        show_default=True,
        help="Project root containing the manifest.",
    )(func)


def git_timeout_option(func: F) -> F:
    return click.option(
        "--git-timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=None,
        help="Seconds allowed per git call (default: wait indefinitely).",
    )(func)


def strict_option(func: F) -> F:
    return click.option(
        "--strict/--no-strict",
        default=True,
        show_default=True,
        help="Abort when a dependency's revision cannot be read.",
    )(func)


def parse_settings(pairs: tuple[str, ...], allowed: set[str]) -> dict[str, str]:
    """Parse trailing ``key=value`` arguments.

    Raises:
        click.UsageError: On a malformed pair or an unknown key.
    """
    settings: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise click.UsageError(f"Expected KEY=VALUE, got {pair!r}")
        if key not in allowed:
            raise click.UsageError(
                f"Unknown setting {key!r} (expected one of: {', '.join(sorted(allowed))})"
            )
        settings[key] = value
    return settings


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn lockdeps errors into a click error message and exit code 1."""
    try:
        yield
    except LockDepsError as exc:
        raise click.ClickException(str(exc)) from exc
