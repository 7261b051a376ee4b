"""Unit tests for aggregate."""

import pytest

from styledscan.api.scan import FileScanResult, aggregate, scan_text

pytestmark = pytest.mark.scan


def _result(name: str, native: dict[str, int], custom: dict[str, int]) -> FileScanResult:
    per_identifier: dict[str, int] = {}
    for counts in (native, custom):
        for key, value in counts.items():
            per_identifier[key] = per_identifier.get(key, 0) + value
    return FileScanResult(
        filename=name,
        native_count=sum(native.values()),
        custom_count=sum(custom.values()),
        per_identifier=per_identifier,
    )


def test_aggregate_empty():
    report = aggregate([])
    assert report.files_scanned == 0
    assert report.native_total == 0
    assert report.custom_total == 0
    assert report.per_identifier == {}
    assert report.ranked == []


def test_aggregate_merges_identifiers_across_files():
    report = aggregate([scan_text("a.ts", "styled.span"), scan_text("b.ts", "styled.span")])
    assert report.files_scanned == 2
    assert report.native_total == 2
    assert report.custom_total == 0
    assert report.ranked == [("span", 2)]


def test_aggregate_totals_are_order_independent():
    a = _result("a.ts", {"div": 3, "p": 1}, {"Button": 2})
    b = _result("b.ts", {"div": 1}, {"Card": 4, "Button": 1})
    forward = aggregate([a, b])
    backward = aggregate([b, a])
    assert (forward.native_total, forward.custom_total) == (backward.native_total, backward.custom_total)
    assert forward.per_identifier == backward.per_identifier
    assert forward.ranked == backward.ranked


def test_aggregate_ranks_by_count_descending():
    report = aggregate([_result("a.ts", {"div": 5, "p": 1}, {"Button": 3})])
    counts = [count for _, count in report.ranked]
    assert counts == sorted(counts, reverse=True)
    assert report.ranked[0] == ("div", 5)


def test_aggregate_breaks_ties_by_name():
    report = aggregate([_result("a.ts", {"span": 2, "a": 2}, {"Zed": 2, "Button": 2})])
    assert report.ranked == [("Button", 2), ("Zed", 2), ("a", 2), ("span", 2)]


def test_aggregate_preserves_count_invariant():
    report = aggregate(
        [
            scan_text("a.ts", "styled.div styled(Box) styledX"),
            scan_text("b.ts", "styled.Box styled.div"),
        ]
    )
    assert report.native_total + report.custom_total == sum(report.per_identifier.values())
    assert report.per_identifier == {"div": 2, "Box": 2, "X": 1}


def test_aggregate_accepts_generator():
    report = aggregate(scan_text(f"{i}.ts", "styled.li") for i in range(3))
    assert report.files_scanned == 3
    assert report.per_identifier == {"li": 3}
