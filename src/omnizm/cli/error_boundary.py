"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from omnizm.cli.output import user_output

T = TypeVar("T", bound=Callable[..., Any])


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    return bool(getattr(ctx.find_root().obj, "debug", False))


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - FileNotFoundError: Missing component sources or directories
        - PermissionError / OSError: File system failures
        - ValueError: Invalid input or malformed manifest
        - RuntimeError: Package manager failures that were not tolerated

    With --debug the exception propagates with its full stack trace.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.Abort:
            raise
        except (OSError, ValueError, RuntimeError) as e:
            if _debug_enabled():
                raise
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
