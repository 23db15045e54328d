"""CLI: lovenest journal list|show|write|delete"""

import json

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from lovenest.models.journal import MOODS, JournalEntry, JournalPage

console = Console()


def _get_client():
    from lovenest.cli.main import _get_client
    return _get_client()


def _require_login(client) -> None:
    from lovenest.cli.main import _require_login
    _require_login(client)


def _run(coro):
    from lovenest.cli.main import _run
    return _run(coro)


@click.group()
def journal():
    """Shared journal."""


@journal.command("list")
@click.option("--limit", default=50, type=int)
@click.option("--page", default=None, type=int)
@click.option("--author", default=None, help="Author user id")
@click.option("--json-output", "--json", is_flag=True)
def journal_list(limit, page, author, json_output):
    """List journal entries."""

    async def _list():
        async with _get_client() as client:
            _require_login(client)
            result = await client.journal.list(page=page, limit=limit, author=author)
        if json_output:
            click.echo(json.dumps(result, indent=2))
            return
        table = Table(title="Journal")
        table.add_column("ID", style="bold")
        table.add_column("Date")
        table.add_column("Title")
        table.add_column("Mood")
        table.add_column("Author")
        for entry in JournalPage.model_validate(result).entries:
            author_name = entry.author_id.display_name if entry.author_id else ""
            table.add_row(entry.id, (entry.date or "")[:10], entry.title, entry.mood or "", author_name)
        console.print(table)

    _run(_list())


@journal.command("show")
@click.argument("entry_id")
def journal_show(entry_id):
    """Read one entry."""

    async def _show():
        async with _get_client() as client:
            _require_login(client)
            result = await client.journal.get(entry_id)
        entry = JournalEntry.model_validate(result.get("entry", result))
        subtitle = " · ".join(x for x in [(entry.date or "")[:10], entry.mood or ""] if x)
        console.print(Panel(entry.content, title=entry.title, subtitle=subtitle or None))

    _run(_show())


@journal.command("write")
@click.argument("title")
@click.option("--content", default=None, help="Entry text (opens an editor when omitted)")
@click.option("--mood", type=click.Choice(MOODS), default=None)
@click.option("--date", default=None, help="YYYY-MM-DD")
def journal_write(title, content, mood, date):
    """Write a new entry."""
    if content is None:
        content = click.edit() or ""
    if not content.strip():
        raise click.UsageError("Entry content is empty.")

    async def _write():
        async with _get_client() as client:
            _require_login(client)
            await client.journal.create(title, content.strip(), mood=mood, date=date)
        console.print("[green]Entry added![/green]")

    _run(_write())


@journal.command("delete")
@click.argument("entry_id")
def journal_delete(entry_id):
    """Delete an entry."""

    async def _delete():
        async with _get_client() as client:
            _require_login(client)
            await client.journal.delete(entry_id)
        console.print(f"[green]Entry {entry_id} deleted.[/green]")

    _run(_delete())
