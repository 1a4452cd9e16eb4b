"""Notebook search: fuzzy topic matching and regex content search.

Topic matching scores each stored topic by normalized Levenshtein
similarity, so a small typo ("rustt") still finds "rust" while unrelated
input finds nothing. Content search is a linear scan with a
case-insensitive regular expression.

Example::

    search = NotebookSearch()
    match = search.match_topic("javscript", book)
    topic = resolve_topic(match, "javscript")
    results = search.search("closure", topic, book)
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger
from rapidfuzz.distance import Levenshtein

from vnote.core.exceptions import PatternError

from .config import SearchConfig
from .models import Note, Notebook


def similarity(a: str, b: str) -> float:
    """Normalized edit-distance similarity in [0.0, 1.0].

    ``(L - levenshtein(a, b)) / L`` where ``L`` is the longer length in code
    points. Identical strings (including two empty ones) score 1.0.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - Levenshtein.distance(a, b)) / longest


@dataclass(frozen=True)
class Exact:
    """The input is a stored topic name."""

    topic: str


@dataclass(frozen=True)
class CloseMatch:
    """The input is probably a typo of ``topic``."""

    topic: str
    score: float


@dataclass(frozen=True)
class Nothing:
    """No stored topic is similar enough to the input."""


PossibleTopic = Exact | CloseMatch | Nothing


def resolve_topic(match: PossibleTopic, requested: str) -> str | None:
    """Topic name to search under for a match result, or None when nothing matched."""
    if isinstance(match, Exact):
        return requested
    if isinstance(match, CloseMatch):
        return match.topic
    return None


def group_by_topic(results: Iterable[tuple[str, Note]]) -> dict[str, list[Note]]:
    """Group search results by topic, keeping result order."""
    grouped: dict[str, list[Note]] = {}
    for topic, note in results:
        grouped.setdefault(topic, []).append(note)
    return grouped


class NotebookSearch:
    """Search over a single in-memory notebook. Never modifies the notebook."""

    def __init__(self, config: SearchConfig | None = None):
        self.config = config or SearchConfig()

    def match_topic(self, topic: str, book: Notebook) -> PossibleTopic:
        """Resolve a possibly mistyped topic against the topics in ``book``.

        Candidates scoring below the threshold are dropped. The best score
        wins; equal scores go to the lexicographically smallest topic name.
        """
        best: tuple[float, str] | None = None
        for candidate in book.topics():
            score = similarity(topic, candidate)
            if score < self.config.similarity_threshold:
                continue
            if best is None or score > best[0] or (score == best[0] and candidate < best[1]):
                best = (score, candidate)

        if best is None:
            logger.debug(f"No topic similar to '{topic}'")
            return Nothing()

        score, candidate = best
        if score == 1.0:
            return Exact(topic=candidate)
        logger.debug(f"Topic '{topic}' resolved to '{candidate}' (score {score:.3f})")
        return CloseMatch(topic=candidate, score=score)

    def search(self, pattern: str, topic: str | None, book: Notebook) -> list[tuple[str, Note]]:
        """Return (topic, note) pairs whose content matches ``pattern``.

        Args:
            pattern: Regular expression, matched case-insensitively anywhere in the note.
            topic: Only search this topic when given (exact name).
            book: Notebook to scan.

        Raises:
            PatternError: ``pattern`` is not a valid regular expression.
        """
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise PatternError(pattern, str(e)) from e

        if topic is None:
            pairs = book.items()
        else:
            pairs = ((topic, note) for note in book.notes(topic))

        results = [(t, note) for t, note in pairs if regex.search(note.content)]
        logger.debug(f"Pattern {pattern!r} matched {len(results)} notes")
        return results
