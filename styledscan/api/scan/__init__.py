"""Scan module - find and count uses of the ``styled`` helper."""

from .aggregate import aggregate
from .AggregateReport import AggregateReport
from .cmd_scan import cmd_scan
from .ElementKind import ElementKind
from .FileScanResult import FileScanResult
from .FilesystemError import FilesystemError
from .format_report import format_report
from .iter_styled_matches import iter_styled_matches
from .list_source_files import list_source_files
from .render_report import render_report
from .scan_bytes import scan_bytes
from .scan_text import scan_text
from .ScanConfig import DEFAULT_ROOT, SOURCE_EXTENSIONS, ScanConfig
from .StyledMatch import StyledMatch

__all__ = [
    "DEFAULT_ROOT",
    "SOURCE_EXTENSIONS",
    "AggregateReport",
    "ElementKind",
    "FileScanResult",
    "FilesystemError",
    "ScanConfig",
    "StyledMatch",
    "aggregate",
    "cmd_scan",
    "format_report",
    "iter_styled_matches",
    "list_source_files",
    "render_report",
    "scan_bytes",
    "scan_text",
]
