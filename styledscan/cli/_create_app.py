"""Create the main Typer CLI app."""

import typer

from styledscan.api.scan import DEFAULT_ROOT, cmd_scan
from styledscan.cli._handle_stage_result import _handle_stage_result
from styledscan.cli._print_report import _print_report


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Count styled.<element> and styled(<Component>) uses in a source tree",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command(name="scan")
    def scan_cmd(
        root: str = typer.Argument(str(DEFAULT_ROOT), help="Directory to scan"),
    ) -> None:
        """Scan ROOT for .js, .ts and .tsx files and report styled usage."""
        _handle_stage_result(cmd_scan, _print_report)(root)

    return app
