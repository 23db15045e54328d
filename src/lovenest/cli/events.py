"""CLI: lovenest events list|upcoming|add|delete"""

import json

import click
from rich.console import Console
from rich.table import Table

from lovenest.models.event import EVENT_TYPES, EventList

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


def _print_events(result: dict, title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", style="bold")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Title")
    table.add_column("Type")
    for e in EventList.model_validate(result).events:
        table.add_row(e.id, e.date[:10], "all day" if e.is_all_day else e.time, e.title, e.event_type)
    console.print(table)


@click.group()
def events():
    """Shared calendar."""


@events.command("list")
@click.option("--month", type=click.IntRange(1, 12), default=None)
@click.option("--year", type=int, default=None)
@click.option("--type", "event_type", type=click.Choice(EVENT_TYPES), default=None)
@click.option("--json-output", "--json", is_flag=True)
def events_list(month, year, event_type, json_output):
    """List calendar events."""

    async def _list():
        async with _get_client() as client:
            _require_login(client)
            result = await client.events.list(month=month, year=year, event_type=event_type)
        if json_output:
            click.echo(json.dumps(result, indent=2))
        else:
            _print_events(result, "Events")

    _run(_list())


@events.command("upcoming")
@click.option("--limit", default=5, type=int)
@click.option("--json-output", "--json", is_flag=True)
def events_upcoming(limit, json_output):
    """Show the next few events."""

    async def _upcoming():
        async with _get_client() as client:
            _require_login(client)
            result = await client.events.upcoming(limit=limit)
        if json_output:
            click.echo(json.dumps(result, indent=2))
        else:
            _print_events(result, "Upcoming")

    _run(_upcoming())


@events.command("add")
@click.argument("title")
@click.argument("date")
@click.option("--time", default=None, help="HH:MM")
@click.option("--location", default=None)
@click.option("--description", default=None)
@click.option("--type", "event_type", type=click.Choice(EVENT_TYPES), default="date")
@click.option("--all-day", is_flag=True)
def events_add(title, date, time, location, description, event_type, all_day):
    """Add an event on DATE (YYYY-MM-DD)."""

    async def _add():
        async with _get_client() as client:
            _require_login(client)
            await client.events.create(
                title, date, description=description, time=time, location=location,
                is_all_day=all_day, event_type=event_type,
            )
        console.print(f"[green]Event added: {title}[/green]")

    _run(_add())


@events.command("delete")
@click.argument("event_id")
def events_delete(event_id):
    """Delete an event."""

    async def _delete():
        async with _get_client() as client:
            _require_login(client)
            await client.events.delete(event_id)
        console.print(f"[green]Event {event_id} deleted.[/green]")

    _run(_delete())
