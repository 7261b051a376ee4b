from collections.abc import Iterator

from .ElementKind import ElementKind
from .STYLED_PATTERN import STYLED_PATTERN
from .StyledMatch import StyledMatch


def iter_styled_matches(text: str) -> Iterator[StyledMatch]:
    """Yield every non-overlapping ``styled`` use in ``text``, left to right."""
    for match in STYLED_PATTERN.finditer(text):
        kind = ElementKind.NATIVE if match.group(1) == "." else ElementKind.CUSTOM
        # Hot loop: the regex already guarantees a non-empty identifier.
        yield StyledMatch.model_construct(kind=kind, identifier=match.group(2))
