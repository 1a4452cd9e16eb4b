"""Notebook model, file storage and search.

Provides the Note/Notebook data model, a NotebookStore protocol with a
YAML file backend, fuzzy topic matching and regex content search.
"""

from .config import SearchConfig
from .models import Note, Notebook
from .search import (
    CloseMatch,
    Exact,
    NotebookSearch,
    Nothing,
    PossibleTopic,
    group_by_topic,
    resolve_topic,
    similarity,
)
from .store import NotebookFileStore, NotebookStore

__all__ = [
    "CloseMatch",
    "Exact",
    "Note",
    "Notebook",
    "NotebookFileStore",
    "NotebookSearch",
    "NotebookStore",
    "Nothing",
    "PossibleTopic",
    "SearchConfig",
    "group_by_topic",
    "resolve_topic",
    "similarity",
]
