"""Pattern scan of one file's text."""

from collections import Counter

from .ElementKind import ElementKind
from .FileScanResult import FileScanResult
from .iter_styled_matches import iter_styled_matches


def scan_text(filename: str, text: str) -> FileScanResult:
    """Count ``styled`` uses in ``text``.

    ``styled.x`` counts as native, ``styled(X)`` and ``styledX`` as custom.
    Identifier counts are keyed on the name alone, so ``styled.a`` and
    ``styled(a)`` both add to ``a``.
    """
    native_count = 0
    custom_count = 0
    per_identifier: Counter[str] = Counter()

    for match in iter_styled_matches(text):
        if match.kind is ElementKind.NATIVE:
            native_count += 1
        else:
            custom_count += 1
        per_identifier[match.identifier] += 1

    return FileScanResult(
        filename=filename,
        native_count=native_count,
        custom_count=custom_count,
        per_identifier=dict(per_identifier),
    )
