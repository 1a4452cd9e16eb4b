"""Shared test fixtures for vnote."""

import os
import tempfile
from datetime import datetime

import pytest

from vnote.book.models import Note, Notebook


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {"data_dir": os.path.join(tmp_dir, "books")},
        "book": {"default": "journal"},
        "search": {"similarity_threshold": 0.8},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def make_note():
    """Build notes with fixed dates so comparisons are stable."""

    def _make(content: str, minute: int = 0) -> Note:
        note = Note.new(content)
        return Note(id=note.id, content=content, date=datetime(2026, 10, 19, 9, minute, 30, 120000))

    return _make


@pytest.fixture
def sample_book(make_note):
    book = Notebook()
    book.add("javascript", make_note("I love JavaScript", 1))
    book.add("python", make_note("Python rocks", 2))
    book.add("javascript", make_note("Closures capture variables, not values", 3))
    book.add("rust", make_note("The borrow checker is my friend", 4))
    return book
