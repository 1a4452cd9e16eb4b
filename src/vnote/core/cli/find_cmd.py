"""vnote find — search notes with a regular expression."""

from __future__ import annotations

import click
from rich.markup import escape

from vnote.core.exceptions import VNoteError


@click.command()
@click.argument("pattern")
@click.option("-t", "--topic", default=None, help="Narrows search to a specific topic.")
@click.option("-b", "--book", default=None, help="Notebook to search (defaults to book.default).")
@click.pass_obj
def find(config, pattern: str, topic: str | None, book: str | None) -> None:
    """Searches for a note using a regular expression."""
    from vnote.book.search import CloseMatch, Nothing, group_by_topic, resolve_topic
    from vnote.core.cli.common import create_search, create_store, get_console

    console = get_console()
    console.print("  [yellow]#[/yellow] searching...")

    try:
        store = create_store(config)
        search = create_search(config)
        notebook = store.load_book(book or config.get_default_book())

        matched_topic = None
        if topic is not None:
            match = search.match_topic(topic, notebook)
            if isinstance(match, Nothing):
                console.print(f"  [red]![/red] topic '{escape(topic)}' not found")
                raise click.exceptions.Exit(1)
            if isinstance(match, CloseMatch):
                console.print(f"  [yellow]#[/yellow] using topic '{escape(match.topic)}' ({match.score:.0%} match)")
            matched_topic = resolve_topic(match, topic)

        results = search.search(pattern, matched_topic, notebook)
    except VNoteError as e:
        raise click.ClickException(f"failed to search notebook: {e}") from e

    if not results:
        console.print("  [green]✓[/green] no results found")
        return

    console.print("  [green]✓[/green] results found")
    for result_topic, notes in group_by_topic(results).items():
        console.print(f"  [green]{escape(result_topic)}[/green]")
        for note in notes:
            console.print(f"   - {escape(note.content)}")
