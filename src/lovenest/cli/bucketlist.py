"""CLI: lovenest bucketlist list|add|complete|uncomplete|delete"""

import json

import click
from rich.console import Console
from rich.table import Table

from lovenest.models.bucketlist import Bucketlist

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
def bucketlist():
    """Bucket list."""


@bucketlist.command("list")
@click.option("--type", "kind", type=click.Choice(["all", "personal", "shared"]), default="all")
@click.option("--json-output", "--json", is_flag=True)
def bucketlist_list(kind, json_output):
    """List bucket list items."""

    async def _list():
        async with _get_client() as client:
            _require_login(client)
            if kind == "personal":
                result = await client.bucketlist.personal()
            elif kind == "shared":
                result = await client.bucketlist.shared()
            else:
                result = await client.bucketlist.list()
        if json_output:
            click.echo(json.dumps(result, indent=2))
            return
        data = Bucketlist.model_validate(result)
        table = Table(title=f"Bucket list ({data.stats.completed}/{data.stats.total} done, {data.stats.progress}%)")
        table.add_column("ID", style="bold")
        table.add_column("Done")
        table.add_column("Goal")
        table.add_column("Type")
        table.add_column("Target")
        for item in data.items:
            table.add_row(item.id, "x" if item.is_completed else "", item.title, item.type, item.target_date or "")
        console.print(table)

    _run(_list())


@bucketlist.command("add")
@click.argument("title")
@click.option("--type", "kind", type=click.Choice(["personal", "shared"]), default="personal")
@click.option("--description", default=None)
@click.option("--target-date", default=None, help="YYYY-MM-DD")
def bucketlist_add(title, kind, description, target_date):
    """Add a goal."""

    async def _add():
        async with _get_client() as client:
            _require_login(client)
            await client.bucketlist.add(title, type=kind, description=description, target_date=target_date)
        console.print(f"[green]Added: {title}[/green]")

    _run(_add())


@bucketlist.command("complete")
@click.argument("item_id")
def bucketlist_complete(item_id):
    """Tick a goal off."""

    async def _complete():
        async with _get_client() as client:
            _require_login(client)
            await client.bucketlist.complete(item_id)
        console.print("[green]Completed![/green]")

    _run(_complete())


@bucketlist.command("uncomplete")
@click.argument("item_id")
def bucketlist_uncomplete(item_id):
    """Reopen a goal."""

    async def _uncomplete():
        async with _get_client() as client:
            _require_login(client)
            await client.bucketlist.uncomplete(item_id)
        console.print("[green]Reopened.[/green]")

    _run(_uncomplete())


@bucketlist.command("delete")
@click.argument("item_id")
def bucketlist_delete(item_id):
    """Delete a goal."""

    async def _delete():
        async with _get_client() as client:
            _require_login(client)
            await client.bucketlist.delete(item_id)
        console.print(f"[green]Item {item_id} deleted.[/green]")

    _run(_delete())
