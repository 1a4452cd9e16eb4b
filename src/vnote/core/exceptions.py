"""
vnote exception hierarchy.

All vnote exceptions inherit from VNoteError, so the CLI can catch every
library-level failure in one place while callers can still tell the failure
modes apart.
"""


class VNoteError(Exception):
    """Base exception class for all vnote errors."""


class ConfigurationError(VNoteError):
    """Raised for configuration errors (unreadable file, invalid values)."""


class FileIOError(VNoteError):
    """Raised when a notebook directory or file cannot be created, read or written."""


class DataProcessingError(VNoteError):
    """Raised when data cannot be converted to or from its stored form."""


class NotebookDecodeError(DataProcessingError):
    """Raised when a notebook file exists but does not hold valid notebook data."""


class NotebookEncodeError(DataProcessingError):
    """Raised when an in-memory notebook cannot be serialized."""


class BookNameError(VNoteError, ValueError):
    """Raised for notebook names that cannot be mapped to a file."""


class PatternError(VNoteError):
    """Raised for search patterns that are not valid regular expressions."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid search pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason
