"""Fold per-file results into one report."""

from collections import Counter
from collections.abc import Iterable

from .AggregateReport import AggregateReport
from .FileScanResult import FileScanResult


def _rank_key(item: tuple[str, int]) -> tuple[int, str]:
    # count descending, then identifier ascending
    name, count = item
    return (-count, name)


def aggregate(results: Iterable[FileScanResult]) -> AggregateReport:
    """Merge per-file scan results.

    Totals do not depend on the order of ``results``. Identifiers with equal
    counts are ranked by name so the ranking does not either.
    """
    files_scanned = 0
    native_total = 0
    custom_total = 0
    per_identifier: Counter[str] = Counter()

    for result in results:
        files_scanned += 1
        native_total += result.native_count
        custom_total += result.custom_count
        per_identifier.update(result.per_identifier)

    ranked = sorted(per_identifier.items(), key=_rank_key)

    return AggregateReport(
        files_scanned=files_scanned,
        native_total=native_total,
        custom_total=custom_total,
        per_identifier=dict(per_identifier),
        ranked=ranked,
    )
