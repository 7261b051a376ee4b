"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F, result_printer: Callable[[dict], None]) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    Announce, progress and result go to stderr; ``result_printer`` renders
    the output payload on stdout.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), result_printer)

    return wrapper  # type: ignore[return-value]
