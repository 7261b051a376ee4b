from pathlib import Path

from .FileScanResult import FileScanResult
from .FilesystemError import FilesystemError
from .scan_bytes import scan_bytes


def _read_and_scan(filename: str) -> FileScanResult:
    """Read one file and scan it. Runs on a worker thread."""
    try:
        data = Path(filename).read_bytes()
    except OSError as e:
        raise FilesystemError(filename, f"Cannot read file ({e.strerror or e})") from e
    return scan_bytes(filename, data)
