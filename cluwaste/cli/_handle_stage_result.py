"""Decorator that renders a StageResult command in the CLI."""

import functools
from collections.abc import Callable
from typing import TypeVar

import click

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("report", "json", "yaml")


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a ``cmd_*`` function so calling it runs and displays all four stages.

    The display format is read from ``ctx.obj["display_format"]``, which the
    command sets from its ``--display`` option; yaml when unset.
    ``result_printer`` renders successful output in the ``report`` format.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .display.CLIDisplay import CLIDisplay

        ctx = click.get_current_context(silent=True)
        obj = ctx.obj if ctx is not None and isinstance(ctx.obj, dict) else {}
        display_format = obj.get("display_format", "yaml")

        printer = result_printer if display_format == "report" else None
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format, printer)

    return wrapper  # type: ignore[return-value]
