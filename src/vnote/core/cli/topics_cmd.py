"""vnote topics — list the topics in a notebook."""

from __future__ import annotations

import click
from rich.markup import escape

from vnote.core.exceptions import VNoteError


@click.command()
@click.option("-b", "--book", default=None, help="Notebook to list (defaults to book.default).")
@click.pass_obj
def topics(config, book: str | None) -> None:
    """Lists topics with their note counts."""
    from vnote.core.cli.common import create_store, get_console

    console = get_console()
    try:
        notebook = create_store(config).load_book(book or config.get_default_book())
    except VNoteError as e:
        raise click.ClickException(f"failed to load notebook: {e}") from e

    if notebook.is_empty():
        console.print("  [green]✓[/green] notebook is empty")
        return

    for name in notebook:
        count = len(notebook.notes(name))
        console.print(f"  [green]{escape(name)}[/green] ({count} note{'s' if count != 1 else ''})")
