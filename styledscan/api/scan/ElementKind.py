"""Kind of element wrapped by ``styled``."""

from enum import Enum


class ElementKind(str, Enum):
    """Syntactic classification of a ``styled`` use.

    ``styled.div`` wraps a native markup element; ``styled(Button)`` (or a
    bare ``styledButton``) wraps a custom component.
    """

    NATIVE = "native"
    CUSTOM = "custom"
