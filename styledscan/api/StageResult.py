"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result returned by a ``cmd_*`` function.

    Stages: ``announce`` is shown before any work, ``progress_callback`` does
    the work and yields ``(fraction, message)`` pairs, then fills in
    ``result`` (one-line summary), ``output`` (structured payload) and
    ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
