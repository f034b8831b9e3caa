"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: Any) -> str:
    """Walk up the context chain to the format set by the main callback."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, ctx: Any = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)

    ``ctx`` is the invoking command's typer.Context; the display format is
    read from it and its parents.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from symsync.cli.display import display_context

        display = display_context.get_display("cli")
        _run_single_execution(func, args, kwargs, display, _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
