"""Scan command - count styled uses under a directory."""

from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ...utils import get_logger
from ..StageResult import StageResult
from ._read_and_scan import _read_and_scan
from .aggregate import aggregate
from .list_source_files import list_source_files
from .ScanConfig import DEFAULT_ROOT, ScanConfig

logger = get_logger("scan.cmd_scan")


def cmd_scan(root: str | Path = DEFAULT_ROOT, max_workers: int | None = None) -> StageResult:
    """Scan ``root`` and report how often ``styled`` wraps each identifier.

    Errors are not caught here: a bad root or an unreadable file aborts the
    run before any output is set.
    """
    config = ScanConfig(root=Path(root), max_workers=max_workers)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, f"Listing source files under {config.root}...")
        files = list_source_files(config.root, config.extensions)

        yield (0.3, f"Scanning {len(files)} files...")
        # Issue every read, then wait for all of them; the first failure propagates.
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            futures = [executor.submit(_read_and_scan, filename) for filename in files]
            file_results = [future.result() for future in futures]
        for file_result in file_results:
            logger.debug(
                f"{file_result.filename}: native={file_result.native_count} custom={file_result.custom_count}"
            )

        yield (0.8, "Aggregating results...")
        report = aggregate(file_results)
        logger.info(
            f"Scanned {report.files_scanned} files: native={report.native_total} custom={report.custom_total}"
        )

        result_obj.result = f"Scanned {report.files_scanned} files under {config.root}"
        result_obj.output = report.model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Scanning {config.root} for styled uses...",
        progress_callback=do_work,
    )
