"""
LoveNest CLI: `lovenest` command.

Commands:
  lovenest auth <cmd>        Login, register, invites, profile
  lovenest memories <cmd>    Photo/video gallery
  lovenest events <cmd>      Shared calendar
  lovenest wishlist <cmd>    Wishlists
  lovenest bucketlist <cmd>  Bucket list
  lovenest journal <cmd>     Journal
"""

import asyncio
import logging
from typing import Any, Coroutine

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from lovenest import __version__
from lovenest.client import AsyncLoveNest
from lovenest.errors import AuthError, LoveNestError

console = Console()


def _get_client() -> AsyncLoveNest:
    return AsyncLoveNest()


def _require_login(client: AsyncLoveNest) -> None:
    if client.token_store.get() is None:
        raise AuthError("Not logged in. Run `lovenest auth login` first.")


def _run(coro: Coroutine[Any, Any, Any]) -> Any:
    try:
        return asyncio.run(coro)
    except LoveNestError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP traffic")
def main(verbose: bool):
    """LoveNest CLI: your shared little nest, from the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Register subcommands from separate modules
from lovenest.cli.auth import auth
from lovenest.cli.memories import memories
from lovenest.cli.events import events
from lovenest.cli.wishlist import wishlist
from lovenest.cli.bucketlist import bucketlist
from lovenest.cli.journal import journal

main.add_command(auth)
main.add_command(memories)
main.add_command(events)
main.add_command(wishlist)
main.add_command(bucketlist)
main.add_command(journal)


if __name__ == "__main__":
    main()
