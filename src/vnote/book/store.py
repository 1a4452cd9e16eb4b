"""Notebook storage — one human-readable YAML file per named notebook.

``NotebookStore`` is the contract the CLI talks to; ``NotebookFileStore`` is
the filesystem implementation. Every mutation is load → change → save, and
every save rewrites the whole file atomically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml
from loguru import logger

from vnote.core.config import DEFAULT_BOOK_NAME
from vnote.core.exceptions import BookNameError, FileIOError, NotebookDecodeError, NotebookEncodeError
from vnote.core.utils.file_io import atomic_write, read_text

from .models import Note, Notebook

DEFAULT_DIR = Path.home() / ".vnote"
DEFAULT_EXTENSION = ".yaml"

# Readers fold these into plain spaces unless they sit in a double-quoted scalar
_LINE_BREAKS = ("\x85", "\u2028", "\u2029")


class _NotebookDumper(yaml.SafeDumper):
    """SafeDumper that double-quotes strings holding Unicode line breaks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if any(ch in data for ch in _LINE_BREAKS):
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


_NotebookDumper.add_representer(str, _represent_str)


@runtime_checkable
class NotebookStore(Protocol):
    """Protocol for loading and saving named notebooks."""

    def setup(self) -> None:
        """Ensure the backing storage exists and is ready to use."""
        ...

    def load_book(self, name: str) -> Notebook:
        """Return the notebook called ``name``, or an empty one if it was never saved."""
        ...

    def save_book(self, name: str, book: Notebook) -> None:
        """Replace the stored notebook called ``name`` with ``book``."""
        ...

    def add_note(self, topic: str, note: Note, name: str | None = None) -> str:
        """File ``note`` under ``topic`` in notebook ``name`` and return the note id."""
        ...


class NotebookFileStore:
    """Stores each notebook as ``<dir_path>/<name><extension>``."""

    def __init__(
        self,
        dir_path: str | Path = DEFAULT_DIR,
        extension: str = DEFAULT_EXTENSION,
        default_book: str = DEFAULT_BOOK_NAME,
    ) -> None:
        self.dir_path = Path(dir_path).expanduser()
        self.extension = extension
        self.default_book = default_book

    def book_path(self, name: str) -> Path:
        """Resolve a notebook name to its file path.

        Rejects names that could escape ``dir_path`` or hide the file.
        """
        if not name or not name.strip():
            raise BookNameError("Notebook name cannot be empty.")
        if "\x00" in name:
            raise BookNameError("Notebook name cannot contain null bytes.")
        if "/" in name or "\\" in name:
            raise BookNameError(f"Notebook name '{name}' cannot contain path separators.")
        if name.startswith("."):
            raise BookNameError(f"Notebook name '{name}' cannot start with '.'.")
        return self.dir_path / f"{name}{self.extension}"

    def setup(self) -> None:
        try:
            self.dir_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileIOError(f"Cannot create notebook directory {self.dir_path}: {e}") from e
        logger.debug(f"Notebook directory ready: {self.dir_path}")

    def load_book(self, name: str) -> Notebook:
        path = self.book_path(name)
        if not path.exists():
            logger.debug(f"No notebook file at {path}, starting empty")
            return Notebook()

        try:
            text = read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError(f"Cannot read notebook {path}: {e}") from e

        try:
            data = yaml.safe_load(text)
            book = Notebook.from_dict(data)
        except yaml.YAMLError as e:
            raise NotebookDecodeError(f"Notebook {path} is not valid YAML: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise NotebookDecodeError(f"Notebook {path} has invalid contents: {e!r}") from e

        logger.debug(f"Loaded notebook '{name}': {book.note_count()} notes in {len(book)} topics")
        return book

    def save_book(self, name: str, book: Notebook) -> None:
        path = self.book_path(name)

        try:
            text = yaml.dump(
                book.to_dict(),
                Dumper=_NotebookDumper,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
            )
        except yaml.YAMLError as e:
            raise NotebookEncodeError(f"Cannot serialize notebook '{name}': {e}") from e

        try:
            atomic_write(path, text)
        except OSError as e:
            raise FileIOError(f"Cannot write notebook {path}: {e}") from e

        logger.debug(f"Saved notebook '{name}' to {path}")

    def add_note(self, topic: str, note: Note, name: str | None = None) -> str:
        name = name or self.default_book
        book = self.load_book(name)
        book.add(topic, note)
        self.save_book(name, book)
        logger.info(f"Added note {note.id} to '{name}' under '{topic}'")
        return note.id
