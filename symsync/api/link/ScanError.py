"""A directory under the root could not be listed."""

from pathlib import Path


class ScanError(Exception):
    """Listing one directory, or reading one of its links, failed.

    Nothing in that directory is changed; other directories are still
    reconciled.
    """

    def __init__(self, directory: Path, cause: OSError):
        self.directory = directory
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to scan {directory}: {reason}")
