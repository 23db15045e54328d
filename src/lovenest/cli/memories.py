"""CLI: lovenest memories list|upload|delete"""

import json

import click
from rich.console import Console
from rich.table import Table

from lovenest.models.memory import MemoryPage

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
def memories():
    """Photo and video memories."""


@memories.command("list")
@click.option("--page", default=None, type=int)
@click.option("--limit", default=None, type=int)
@click.option("--type", "media_type", type=click.Choice(["image", "video"]), default=None)
@click.option("--json-output", "--json", is_flag=True)
def memories_list(page, limit, media_type, json_output):
    """List memories."""

    async def _list():
        async with _get_client() as client:
            _require_login(client)
            result = await client.memories.list(page=page, limit=limit, type=media_type)
        if json_output:
            click.echo(json.dumps(result, indent=2))
            return
        data = MemoryPage.model_validate(result)
        pagination = data.pagination
        title = f"Memories (page {pagination.page}/{pagination.pages})" if pagination else "Memories"
        table = Table(title=title)
        table.add_column("ID", style="bold")
        table.add_column("Type")
        table.add_column("Caption")
        table.add_column("Taken")
        table.add_column("By")
        for m in data.memories:
            by = m.uploaded_by.display_name if m.uploaded_by else ""
            table.add_row(m.id, m.type, m.caption, m.date_taken or "", by)
        console.print(table)
        if pagination and pagination.has_more:
            console.print(f"[dim]More: --page {pagination.page + 1}[/dim]")

    _run(_list())


@memories.command("upload")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--caption", default="")
@click.option("--date-taken", default=None, help="YYYY-MM-DD")
def memories_upload(file_path, caption, date_taken):
    """Upload a photo or video."""

    async def _upload():
        async with _get_client() as client:
            _require_login(client)
            with console.status("Uploading..."):
                result = await client.memories.upload(file_path, caption=caption, date_taken=date_taken)
        memory = result.get("memory", result) if isinstance(result, dict) else {}
        console.print(f"[green]Memory saved: {memory.get('_id', 'OK')}[/green]")

    _run(_upload())


@memories.command("delete")
@click.argument("memory_id")
@click.confirmation_option(prompt="Delete this memory?")
def memories_delete(memory_id):
    """Delete a memory."""

    async def _delete():
        async with _get_client() as client:
            _require_login(client)
            await client.memories.delete(memory_id)
        console.print(f"[green]Memory {memory_id} deleted.[/green]")

    _run(_delete())
