import sys

from rich.console import Console

from .AggregateReport import AggregateReport
from .format_report import format_report


def render_report(report: AggregateReport, files_scanned: int | None = None) -> None:
    """Print the report to standard output."""
    # Plain text only: identifiers must never be read as rich markup or emoji codes.
    console = Console(file=sys.stdout, markup=False, emoji=False, highlight=False, soft_wrap=True)
    for line in format_report(report, files_scanned):
        console.print(line)
