"""vnote add — file a new note under a topic."""

from __future__ import annotations

import click
from rich.markup import escape

from vnote.core.exceptions import VNoteError


@click.command()
@click.argument("topic")
@click.argument("note")
@click.option("-b", "--book", default=None, help="Notebook to add to (defaults to book.default).")
@click.pass_obj
def add(config, topic: str, note: str, book: str | None) -> None:
    """Adds a note to a notebook under TOPIC."""
    from vnote.book.models import Note
    from vnote.core.cli.common import create_store, get_console

    console = get_console()
    console.print(f"  [yellow]#[/yellow] adding \\[{escape(topic)}] {escape(note)}")

    new_note = Note.new(note)
    store = create_store(config)

    try:
        store.setup()
        config.ensure_config_file()
        note_id = store.add_note(topic, new_note, book)
    except (VNoteError, ValueError) as e:
        raise click.ClickException(f"failed to save notebook: {e}") from e

    console.print(f"  [green]✓[/green] added {note_id}")
