"""styledscan - count `styled` helper usages across a source tree."""

__version__ = "0.1.0"
