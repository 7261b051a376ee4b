"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from typing import TypeVar

import typer

from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    result_printer: Callable[[dict], None],
) -> None:
    """Run command once and display result.

    Exceptions raised by the command propagate to the caller untouched, so a
    failed run prints nothing on stdout.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress - progress_callback yields (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        display.info(f"Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")

    # Stage 3: Result (cmd_scan raises on failure; success=False serves commands that report it)
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result.success:
        result_printer(result.output)

    raise typer.Exit(0 if result.success else 1)
