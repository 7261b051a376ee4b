"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from styledscan.cli._create_app import _create_app
    from styledscan.utils import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    app = _create_app()
    try:
        rc = app(argv, standalone_mode=False)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rc if isinstance(rc, int) else 0
