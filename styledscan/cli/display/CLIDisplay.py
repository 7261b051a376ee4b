"""CLI display implementation using Rich library."""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Status display on stderr; stdout stays reserved for command output."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr, soft_wrap=True)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%H:%M:%S")

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {escape(message)}")

    def info(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] {escape(message)}")
