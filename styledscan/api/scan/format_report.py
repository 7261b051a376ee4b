from .AggregateReport import AggregateReport


def format_report(report: AggregateReport, files_scanned: int | None = None) -> list[str]:
    """Build the report lines.

    ``files_scanned`` overrides the count stored in the report.
    """
    if files_scanned is None:
        files_scanned = report.files_scanned

    lines = [
        f"{files_scanned} files scanned",
        f"Native elements restyled: {report.native_total}",
        f"Custom elements restyled: {report.custom_total}",
        "Details:",
    ]
    lines.extend(f"  {name}: {count}" for name, count in report.ranked)
    return lines
