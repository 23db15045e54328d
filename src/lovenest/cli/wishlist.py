"""CLI: lovenest wishlist mine|partner|add|fulfill|unfulfill|delete"""

import json

import click
from rich.console import Console
from rich.table import Table

from lovenest.models.wishlist import PRIORITIES, WishlistItems

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


def _print_items(result: dict, title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", style="bold")
    table.add_column("Wish")
    table.add_column("Priority")
    table.add_column("Link")
    table.add_column("Granted")
    for item in WishlistItems.model_validate(result).items:
        table.add_row(item.id, item.title, item.priority, item.link or "", "yes" if item.is_fulfilled else "")
    console.print(table)


@click.group()
def wishlist():
    """Wishlists."""


@wishlist.command("mine")
@click.option("--json-output", "--json", is_flag=True)
def wishlist_mine(json_output):
    """Show your wishlist."""

    async def _mine():
        async with _get_client() as client:
            _require_login(client)
            result = await client.wishlist.mine()
        if json_output:
            click.echo(json.dumps(result, indent=2))
        else:
            _print_items(result, "My wishlist")

    _run(_mine())


@wishlist.command("partner")
@click.option("--json-output", "--json", is_flag=True)
def wishlist_partner(json_output):
    """Show your partner's wishlist."""

    async def _partner():
        async with _get_client() as client:
            _require_login(client)
            result = await client.wishlist.partner()
        if json_output:
            click.echo(json.dumps(result, indent=2))
        else:
            _print_items(result, "Partner's wishlist")

    _run(_partner())


@wishlist.command("add")
@click.argument("title")
@click.option("--description", default=None)
@click.option("--link", default=None)
@click.option("--priority", type=click.Choice(PRIORITIES), default="medium")
@click.option("--image", "image_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Attach a picture (multipart upload)")
def wishlist_add(title, description, link, priority, image_path):
    """Add a wish."""

    async def _add():
        async with _get_client() as client:
            _require_login(client)
            if image_path:
                await client.wishlist.add_with_image(
                    title, image_path, description=description, link=link, priority=priority,
                )
            else:
                await client.wishlist.add(title, description=description, link=link, priority=priority)
        console.print(f"[green]Added to wishlist: {title}[/green]")

    _run(_add())


@wishlist.command("fulfill")
@click.argument("item_id")
def wishlist_fulfill(item_id):
    """Mark a partner's wish as granted."""

    async def _fulfill():
        async with _get_client() as client:
            _require_login(client)
            await client.wishlist.fulfill(item_id)
        console.print("[green]Wish granted![/green]")

    _run(_fulfill())


@wishlist.command("unfulfill")
@click.argument("item_id")
def wishlist_unfulfill(item_id):
    """Undo a granted wish."""

    async def _unfulfill():
        async with _get_client() as client:
            _require_login(client)
            await client.wishlist.unfulfill(item_id)
        console.print("[green]Wish reopened.[/green]")

    _run(_unfulfill())


@wishlist.command("delete")
@click.argument("item_id")
def wishlist_delete(item_id):
    """Remove a wish."""

    async def _delete():
        async with _get_client() as client:
            _require_login(client)
            await client.wishlist.delete(item_id)
        console.print("[green]Item removed.[/green]")

    _run(_delete())
