"""CLI: lovenest auth login|register|logout|status|whoami|invite|accept-invite|update-profile|couple"""

import os
from typing import Optional

import click
from rich.console import Console

from lovenest.config import BASE_URL_ENV, load_config, save_config

console = Console()

BASE_URL_HELP = f"LoveNest API base URL, saved for later commands ({BASE_URL_ENV} overrides it)"


def _get_client():
    from lovenest.cli.main import _get_client
    return _get_client()


def _require_login(client) -> None:
    from lovenest.cli.main import _require_login
    _require_login(client)


def _run(coro):
    from lovenest.cli.main import _run
    return _run(coro)


def _remember_base_url(base_url: Optional[str]) -> None:
    if not base_url:
        return
    save_config({**load_config(), "base_url": base_url.rstrip("/")})
    if os.environ.get(BASE_URL_ENV):
        console.print(f"[yellow]{BASE_URL_ENV} is set and takes precedence over the saved --base-url.[/yellow]")


@click.group()
def auth():
    """Account and partner commands."""


@auth.command("login")
@click.option("--email", prompt=True)
@click.option("--password", prompt=True, hide_input=True)
@click.option("--base-url", default=None, help=BASE_URL_HELP)
def auth_login(email: str, password: str, base_url: Optional[str]):
    """Log in with email and password."""
    _remember_base_url(base_url)

    async def _login():
        async with _get_client() as client:
            with console.status("Logging in..."):
                user = await client.session.login(email, password)
            if user is None:
                console.print("[yellow]Logged in, but the server could not confirm the session. Try `lovenest auth status`.[/yellow]")
                return
            console.print(f"[green]Logged in as {user.display_name} ({user.email})[/green]")
            if client.session.partner:
                console.print(f"[magenta]Linked with {client.session.partner.display_name}[/magenta]")

    _run(_login())


@auth.command("register")
@click.option("--email", prompt=True)
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--name", "display_name", prompt="Display name")
@click.option("--nickname", default=None)
@click.option("--birthday", default=None, help="YYYY-MM-DD")
@click.option("--base-url", default=None, help=BASE_URL_HELP)
def auth_register(email, password, display_name, nickname, birthday, base_url):
    """Create a new account."""
    _remember_base_url(base_url)

    async def _register():
        async with _get_client() as client:
            with console.status("Creating account..."):
                user = await client.session.register(
                    email, password, display_name, nickname=nickname, birthday=birthday,
                )
            console.print(f"[green]Welcome, {user.display_name}![/green]")
            console.print("[dim]Invite your partner with `lovenest auth invite <email>`.[/dim]")

    _run(_register())


@auth.command("logout")
def auth_logout():
    """Log out and forget the saved token."""

    async def _logout():
        async with _get_client() as client:
            await client.session.logout()
        console.print("[green]Logged out.[/green]")

    _run(_logout())


@auth.command("status")
def auth_status():
    """Show whether a session is active."""

    async def _status():
        async with _get_client() as client:
            state = await client.session.initialize()
            if client.session.is_authenticated:
                user = client.session.user
                console.print(f"[green]Logged in[/green] as {user.display_name} ({user.email})")
            elif client.token_store.get():
                console.print(f"[yellow]Token saved but the server could not confirm it ({state.value}).[/yellow]")
            else:
                console.print("[yellow]Not logged in. Run `lovenest auth login`.[/yellow]")

    _run(_status())


@auth.command("whoami")
@click.option("--json-output", "--json", is_flag=True)
def auth_whoami(json_output: bool):
    """Show your profile and your partner."""

    async def _whoami():
        async with _get_client() as client:
            _require_login(client)
            me = await client.auth.get_me()
            if json_output:
                click.echo(me.model_dump_json(by_alias=True, indent=2))
                return
            console.print(f"[bold]{me.user.display_name}[/bold] <{me.user.email}>")
            if me.user.nickname:
                console.print(f"  nickname: {me.user.nickname}")
            if me.user.birthday:
                console.print(f"  birthday: {me.user.birthday}")
            if me.partner:
                console.print(f"[magenta]Partner:[/magenta] {me.partner.display_name} <{me.partner.email}>")
            else:
                console.print("[dim]No partner linked yet.[/dim]")
            couple = me.user.couple
            if couple and couple.couple_name:
                console.print(f"  couple: {couple.couple_name}")

    _run(_whoami())


@auth.command("invite")
@click.argument("email")
def auth_invite(email: str):
    """Invite your partner by email."""

    async def _invite():
        async with _get_client() as client:
            _require_login(client)
            with console.status("Sending invitation..."):
                result = await client.auth.send_invite(email)
            if result.email_sent:
                console.print("[green]Invitation sent![/green]")
            else:
                console.print("[yellow]Email could not be sent. Share this link with your partner:[/yellow]")
                click.echo(result.invite_url or "")

    _run(_invite())


@auth.command("accept-invite")
@click.argument("invite_token")
@click.option("--email", prompt=True)
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--name", "display_name", prompt="Display name")
@click.option("--nickname", default=None)
@click.option("--birthday", default=None, help="YYYY-MM-DD")
def auth_accept_invite(invite_token, email, password, display_name, nickname, birthday):
    """Join your partner from an invitation token."""

    async def _accept():
        async with _get_client() as client:
            info = await client.auth.validate_invite(invite_token)
            if info.inviter:
                console.print(f"[magenta]Invitation from {info.inviter.display_name}[/magenta]")
            user = await client.session.accept_invite(
                invite_token, email, password, display_name, nickname=nickname, birthday=birthday,
            )
            if user is None:
                console.print("[yellow]Account created, but the server could not confirm the session. Try `lovenest auth status`.[/yellow]")
                return
            console.print(f"[green]You are now connected, {user.display_name}![/green]")

    _run(_accept())


@auth.command("update-profile")
@click.option("--name", "display_name", default=None)
@click.option("--nickname", default=None)
@click.option("--birthday", default=None)
@click.option("--avatar", default=None, help="Avatar URL")
def auth_update_profile(display_name, nickname, birthday, avatar):
    """Update your profile."""

    async def _update():
        async with _get_client() as client:
            _require_login(client)
            await client.auth.update_profile(
                display_name=display_name, nickname=nickname, birthday=birthday, avatar=avatar,
            )
            console.print("[green]Profile updated.[/green]")

    _run(_update())


@auth.command("couple")
@click.option("--name", "couple_name", default=None)
@click.option("--anniversary", default=None, help="YYYY-MM-DD")
@click.option("--partner1-nickname", default=None)
@click.option("--partner2-nickname", default=None)
def auth_couple(couple_name, anniversary, partner1_nickname, partner2_nickname):
    """Update couple settings."""

    async def _update():
        async with _get_client() as client:
            _require_login(client)
            await client.auth.update_couple(
                couple_name=couple_name, anniversary=anniversary,
                partner1_nickname=partner1_nickname, partner2_nickname=partner2_nickname,
            )
            console.print("[green]Couple settings updated.[/green]")

    _run(_update())
