"""Tests for vnote.book.store (NotebookFileStore)."""

import os
from unittest.mock import patch

import pytest
import yaml

from vnote.book.models import Note, Notebook
from vnote.book.store import NotebookFileStore, NotebookStore
from vnote.core.exceptions import BookNameError, FileIOError, NotebookDecodeError, NotebookEncodeError


@pytest.fixture
def books_dir(tmp_path):
    return tmp_path / "books"


@pytest.fixture
def store(books_dir):
    s = NotebookFileStore(books_dir)
    s.setup()
    return s


def test_implements_protocol(store):
    assert isinstance(store, NotebookStore)


class TestSetup:
    def test_creates_nested_dirs(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        NotebookFileStore(target).setup()
        assert target.is_dir()

    def test_idempotent(self, store, books_dir):
        store.setup()
        assert books_dir.is_dir()

    def test_failure_raises_file_io_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(FileIOError, match="Cannot create"):
            NotebookFileStore(blocker / "books").setup()


class TestBookPath:
    def test_uses_extension(self, store, books_dir):
        assert store.book_path("notes") == books_dir / "notes.yaml"

    def test_custom_extension(self, books_dir):
        assert NotebookFileStore(books_dir, extension=".yml").book_path("work") == books_dir / "work.yml"

    @pytest.mark.parametrize("name", ["", "   ", "../escape", "a/b", "a\\b", ".hidden", "nul\x00"])
    def test_rejects_unsafe_names(self, store, name):
        with pytest.raises(BookNameError):
            store.book_path(name)


class TestLoadBook:
    def test_missing_file_returns_empty(self, store):
        book = store.load_book("never-saved")
        assert book.is_empty()

    def test_missing_directory_returns_empty(self, tmp_path):
        book = NotebookFileStore(tmp_path / "nowhere").load_book("notes")
        assert book.is_empty()

    def test_empty_file_returns_empty(self, store):
        store.book_path("notes").write_text("")
        assert store.load_book("notes").is_empty()

    def test_invalid_yaml(self, store):
        store.book_path("notes").write_text("rust: [unclosed\n")
        with pytest.raises(NotebookDecodeError, match="not valid YAML"):
            store.load_book("notes")

    def test_foreign_content(self, store):
        store.book_path("notes").write_text("just some text\n")
        with pytest.raises(NotebookDecodeError, match="invalid contents"):
            store.load_book("notes")

    def test_bad_note_record(self, store):
        store.book_path("notes").write_text("rust:\n- id: nope\n  content: x\n  date: '2026-01-01T00:00:00'\n")
        with pytest.raises(NotebookDecodeError):
            store.load_book("notes")

    def test_unquoted_timestamp_is_accepted(self, store):
        store.book_path("notes").write_text(
            "rust:\n- id: 1b4e28ba-2fa1-41d2-883f-0016d3cca427\n  content: hand edited\n  date: 2026-01-01 10:00:00\n"
        )
        book = store.load_book("notes")
        assert book.notes("rust")[0].content == "hand edited"

    def test_read_failure(self, store):
        store.book_path("notes").write_text("{}")
        with patch("vnote.book.store.read_text", side_effect=PermissionError("denied")):
            with pytest.raises(FileIOError, match="Cannot read"):
                store.load_book("notes")


class TestSaveBook:
    def test_roundtrip(self, store, sample_book):
        store.save_book("notes", sample_book)
        loaded = store.load_book("notes")

        assert loaded == sample_book
        assert loaded.topics() == sample_book.topics()
        for topic in sample_book:
            for saved, original in zip(loaded.notes(topic), sample_book.notes(topic), strict=True):
                assert saved.id == original.id
                assert saved.content == original.content
                assert saved.date == original.date

    def test_unicode_and_multiline_content(self, store):
        book = Notebook()
        book.add("日本語", Note.new("café ☕\nsecond line: with colon\n- and a dash"))
        store.save_book("notes", book)
        assert store.load_book("notes") == book

    @pytest.mark.parametrize("content", ["mid\x85dle", "\x85nel", "line\u2028sep", "para\u2029sep", "crlf\r\nend"])
    def test_unicode_line_breaks_survive(self, store, content):
        book = Notebook()
        book.add("misc", Note.new(content))
        store.save_book("notes", book)
        assert store.load_book("notes").notes("misc")[0].content == content

    def test_unicode_line_break_in_topic_survives(self, store):
        book = Notebook()
        book.add("to\x85pic", Note.new("x"))
        store.save_book("notes", book)
        assert store.load_book("notes").topics() == ["to\x85pic"]

    def test_file_is_human_readable_yaml(self, store, sample_book):
        store.save_book("notes", sample_book)
        text = store.book_path("notes").read_text(encoding="utf-8")
        data = yaml.safe_load(text)
        assert list(data) == ["javascript", "python", "rust"]
        assert set(data["rust"][0]) == {"id", "content", "date"}
        assert "I love JavaScript" in text

    def test_overwrites_whole_file(self, store, sample_book):
        store.save_book("notes", sample_book)
        store.save_book("notes", Notebook())
        assert store.load_book("notes").is_empty()

    def test_empty_topics_not_persisted(self, store, make_note):
        book = Notebook({"rust": [make_note("kept")], "csharp": []})
        store.save_book("notes", book)
        assert store.load_book("notes").topics() == ["rust"]

    def test_books_are_independent(self, store, sample_book):
        store.save_book("work", sample_book)
        assert store.load_book("home").is_empty()
        assert sorted(os.listdir(store.dir_path)) == ["work.yaml"]

    def test_creates_directory_if_missing(self, tmp_path, sample_book):
        s = NotebookFileStore(tmp_path / "late")
        s.save_book("notes", sample_book)
        assert s.load_book("notes") == sample_book

    def test_encode_failure(self, store, sample_book):
        with patch("vnote.book.store.yaml.dump", side_effect=yaml.representer.RepresenterError("bad")):
            with pytest.raises(NotebookEncodeError):
                store.save_book("notes", sample_book)

    def test_write_failure_keeps_previous_file(self, store, sample_book):
        store.save_book("notes", sample_book)
        with patch("vnote.book.store.atomic_write", side_effect=OSError("read-only")):
            with pytest.raises(FileIOError, match="Cannot write"):
                store.save_book("notes", Notebook())
        assert store.load_book("notes") == sample_book


class TestAddNote:
    def test_first_note(self, store, make_note):
        note = make_note("first")
        note_id = store.add_note("rust", note)

        assert note_id == note.id
        book = store.load_book("notes")
        assert book.topics() == ["rust"]
        assert book.notes("rust") == [note]

    def test_appends_in_order(self, store, make_note):
        first, second = make_note("first", 1), make_note("second", 2)
        store.add_note("rust", first)
        store.add_note("rust", second)
        assert store.load_book("notes").notes("rust") == [first, second]

    def test_default_book_name(self, books_dir, make_note):
        s = NotebookFileStore(books_dir, default_book="journal")
        s.add_note("rust", make_note("x"))
        assert (books_dir / "journal.yaml").exists()

    def test_named_book(self, store, make_note):
        store.add_note("rust", make_note("x"), "work")
        assert not store.load_book("work").is_empty()
        assert store.load_book("notes").is_empty()

    def test_keeps_existing_topics(self, store, sample_book, make_note):
        store.save_book("notes", sample_book)
        store.add_note("go", make_note("goroutines"))
        book = store.load_book("notes")
        assert book.topics() == ["javascript", "python", "rust", "go"]
        assert book.note_count() == 5

    def test_corrupt_book_not_overwritten(self, store, make_note):
        path = store.book_path("notes")
        path.write_text("rust: [unclosed\n")
        with pytest.raises(NotebookDecodeError):
            store.add_note("rust", make_note("x"))
        assert path.read_text() == "rust: [unclosed\n"
