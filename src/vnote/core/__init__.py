"""Shared infrastructure: config, exceptions, logging, file I/O, CLI."""

from .config import Config
from .exceptions import (
    BookNameError,
    ConfigurationError,
    DataProcessingError,
    FileIOError,
    NotebookDecodeError,
    NotebookEncodeError,
    PatternError,
    VNoteError,
)

__all__ = [
    "BookNameError",
    "Config",
    "ConfigurationError",
    "DataProcessingError",
    "FileIOError",
    "NotebookDecodeError",
    "NotebookEncodeError",
    "PatternError",
    "VNoteError",
]
