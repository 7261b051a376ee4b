"""Entry point for running styledscan as a module."""

from styledscan.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
