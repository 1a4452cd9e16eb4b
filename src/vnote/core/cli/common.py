"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from vnote.core.config import DEFAULT_CONFIG_NAME, Config
from vnote.core.exceptions import VNoteError
from vnote.core.utils.logging import setup_logging

VNOTE_DIR = Path.home() / ".vnote"
CONFIG_PATH = VNOTE_DIR / DEFAULT_CONFIG_NAME


def load_config(config_path: str | Path = CONFIG_PATH, verbose: bool = False) -> Config:
    """Load config and configure logging from it."""
    try:
        config = Config(config_file=str(config_path), data_dir=str(VNOTE_DIR))
    except VNoteError as e:
        raise click.ClickException(str(e)) from e

    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING"))
    setup_logging(level=level, log_file=config.get("logging.file") or None)
    return config


def create_store(config: Config):
    """Create the notebook file store described by config."""
    from vnote.book.store import NotebookFileStore

    return NotebookFileStore(
        dir_path=config.get_data_dir(),
        extension=config.get("book.extension", ".yaml"),
        default_book=config.get_default_book(),
    )


def create_search(config: Config):
    """Create a NotebookSearch using the configured topic threshold."""
    from vnote.book.config import SearchConfig
    from vnote.book.search import NotebookSearch

    return NotebookSearch(SearchConfig(similarity_threshold=config.get_similarity_threshold()))


def get_console() -> Console:
    return Console(highlight=False, emoji=False)

