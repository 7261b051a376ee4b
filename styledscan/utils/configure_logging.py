import logging
import sys

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure styledscan logging.

    Installs a single stderr handler on the ``styledscan`` logger. Standard
    output is reserved for the report, so nothing is ever logged there.

    Args:
        level: Logging level for the ``styledscan`` namespace (default WARNING)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("styledscan")
    root_logger.setLevel(level)

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True
