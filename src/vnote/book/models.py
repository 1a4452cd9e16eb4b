"""Core data models: notes and the notebook that files them under topics.

A notebook maps topic names to the notes added under them, in the order they
were added. Both types convert to and from plain dicts so the store can
serialize them without knowing their internals.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


def _parse_date(value: Any) -> datetime:
    # YAML loaders may already have turned an unquoted timestamp into a datetime
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise TypeError(f"Expected an ISO timestamp, got {type(value).__name__}")


@dataclass(frozen=True)
class Note:
    """A single micro note.

    Attributes:
        id: UUID string, assigned at creation and never reassigned.
        content: The note text, stored verbatim.
        date: Creation time in local time.
    """

    id: str
    content: str
    date: datetime

    @classmethod
    def new(cls, content: str) -> Note:
        """Create a note with a fresh id, stamped with the current local time."""
        return cls(id=str(uuid.uuid4()), content=content, date=datetime.now())

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "content": self.content, "date": self.date.isoformat()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Note:
        """Build a note from its stored record.

        Raises:
            KeyError: A required field is missing.
            TypeError: A field has the wrong type.
            ValueError: The id is not a UUID or the date is not ISO-8601.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Note record must be a mapping, got {type(data).__name__}")
        content = data["content"]
        if not isinstance(content, str):
            raise TypeError(f"Note content must be a string, got {type(content).__name__}")
        note_id = str(uuid.UUID(str(data["id"])))
        return cls(id=note_id, content=content, date=_parse_date(data["date"]))

    def __repr__(self) -> str:
        preview = self.content[:40] + "..." if len(self.content) > 40 else self.content
        return f"Note(id='{self.id}', content='{preview}')"


class Notebook:
    """Topic name -> ordered list of notes.

    Topics keep the order in which they were first used; notes within a
    topic keep the order in which they were added.
    """

    def __init__(self, topics: Mapping[str, list[Note]] | None = None):
        self._topics: dict[str, list[Note]] = {}
        for topic, notes in (topics or {}).items():
            for note in notes:
                self.add(topic, note)

    def add(self, topic: str, note: Note) -> None:
        """Append a note under topic, creating the topic if needed."""
        if not topic:
            raise ValueError("Topic name cannot be empty")
        self._topics.setdefault(topic, []).append(note)

    def topics(self) -> list[str]:
        return list(self._topics)

    def notes(self, topic: str) -> list[Note]:
        """Notes filed under topic, oldest first. Unknown topics give an empty list."""
        return list(self._topics.get(topic, []))

    def items(self) -> Iterator[tuple[str, Note]]:
        """Yield every (topic, note) pair in notebook order."""
        for topic, notes in self._topics.items():
            for note in notes:
                yield topic, note

    def note_count(self) -> int:
        return sum(len(notes) for notes in self._topics.values())

    def is_empty(self) -> bool:
        return not self._topics

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Plain-data form for serialization. Topics without notes are left out."""
        return {topic: [note.to_dict() for note in notes] for topic, notes in self._topics.items() if notes}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Notebook:
        """Rebuild a notebook from its plain-data form.

        Raises:
            KeyError, TypeError, ValueError: The data is not a valid notebook.
        """
        book = cls()
        if data is None:
            return book
        if not isinstance(data, Mapping):
            raise TypeError(f"Notebook must be a mapping of topics, got {type(data).__name__}")

        for topic, records in data.items():
            if not isinstance(topic, str) or not topic:
                raise TypeError(f"Topic names must be non-empty strings, got {topic!r}")
            if records is None:
                continue
            if not isinstance(records, list):
                raise TypeError(f"Topic '{topic}' must hold a list of notes")
            for record in records:
                book.add(topic, Note.from_dict(record))
        return book

    def __len__(self) -> int:
        return len(self._topics)

    def __contains__(self, topic: object) -> bool:
        return topic in self._topics

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._topics))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Notebook):
            return NotImplemented
        return self._topics == other._topics

    def __repr__(self) -> str:
        return f"Notebook(topics={len(self)}, notes={self.note_count()})"
