"""Discovery of eligible source files."""

from collections.abc import Iterable
from pathlib import Path

from ...utils import get_logger
from .FilesystemError import FilesystemError
from .ScanConfig import SOURCE_EXTENSIONS

logger = get_logger("scan.list_source_files")


def _walk(root: Path, extensions: frozenset[str]) -> list[str]:
    found: list[str] = []
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            raise FilesystemError(str(directory), f"Cannot list directory ({e.strerror or e})") from e

        for entry in entries:
            if entry.is_symlink():
                logger.debug(f"Skipping symlink {entry}")
                continue
            if entry.is_dir():
                pending.append(entry)
            elif entry.is_file() and entry.suffix in extensions:
                found.append(str(entry))
    return found


def list_source_files(root: str | Path, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> list[str]:
    """List every eligible source file under ``root``, at any depth.

    Args:
        root: Directory to walk
        extensions: Allowed suffixes (default ``.js``, ``.ts``, ``.tsx``)

    Returns:
        File paths under ``root``. The list is sorted only so logs are
        reproducible; callers must not depend on the order.

    Raises:
        FilesystemError: If ``root`` is missing or not a directory, or if any
            directory under it cannot be listed.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FilesystemError(str(root_path), "Scan root does not exist")
    if not root_path.is_dir():
        raise FilesystemError(str(root_path), "Scan root is not a directory")

    found = _walk(root_path, frozenset(extensions))
    found.sort()
    logger.info(f"Found {len(found)} source files under {root_path}")
    return found
