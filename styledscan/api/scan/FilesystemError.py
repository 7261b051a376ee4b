"""Filesystem error raised while discovering or reading source files."""


class FilesystemError(OSError):
    """Raised when the scan root or a file under it cannot be traversed or read.

    Always fatal: the whole run aborts and no report is printed.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")
