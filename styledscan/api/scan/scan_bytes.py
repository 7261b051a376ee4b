from .FileScanResult import FileScanResult
from .scan_text import scan_text


def scan_bytes(filename: str, data: bytes) -> FileScanResult:
    """Decode raw file content as UTF-8 (invalid bytes replaced) and scan it."""
    return scan_text(filename, data.decode("utf-8", errors="replace"))
