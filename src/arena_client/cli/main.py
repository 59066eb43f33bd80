"""Command-Line Interface for the Are.na client.

Provides commands to inspect the authenticated user, channels and blocks, and
to search Are.na from the terminal.
"""

import asyncio
import logging
import os
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console

from arena_client.api import ArenaClient, HttpError, PaginationAttributes
from arena_client.cli.display import (
    display_block,
    display_channel,
    display_search_results,
    display_user,
)
from arena_client.config import Config
from arena_client.util.logging import setup_logging

T = TypeVar("T")

app = typer.Typer(
    name="arena",
    help="A CLI tool to browse and search Are.na.",
    add_completion=False,
    rich_markup_mode="markdown",
)

TokenOption = typer.Option(
    None,
    "--token",
    help=f"Are.na access token. Overrides the {Config.ACCESS_TOKEN_ENV_VAR} env var.",
)


def _get_console(use_stderr: bool = False) -> Console:
    """Create a Rich console writing to stdout or stderr."""
    return Console(stderr=use_stderr)


def _make_client(token: Optional[str]) -> ArenaClient:
    """Build a client, falling back to the token in the environment."""
    return ArenaClient(token=token or os.getenv(Config.ACCESS_TOKEN_ENV_VAR))


def _run(operation: Callable[[], Awaitable[T]]) -> T:
    """Run an API call to completion, turning HTTP errors into exit code 1."""
    try:
        return asyncio.run(operation())
    except HttpError as e:
        _get_console(use_stderr=True).print(
            f"[bold red]Error {e.status}: {e.message}[/bold red]"
        )
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every request made to the API."
    ),
):
    """Browse and search Are.na."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("me")
def me_command(token: Optional[str] = TokenOption):
    """Show the authenticated user."""
    client = _make_client(token)
    display_user(_run(client.me))


@app.command("channel")
def channel_command(
    slug: str = typer.Argument(..., help="Slug of the channel."),
    page: Optional[int] = typer.Option(None, "--page", "-p", help="Page to fetch."),
    per: Optional[int] = typer.Option(None, "--per", help="Items per page."),
    sort: Optional[str] = typer.Option(None, "--sort", help="Field to sort by."),
    direction: Optional[str] = typer.Option(
        None, "--direction", help="Sort direction: 'asc' or 'desc'."
    ),
    refresh: bool = typer.Option(
        False, "--refresh", help="Bypass the server-side cache."
    ),
    token: Optional[str] = TokenOption,
):
    """Show a channel and one page of its contents."""
    if direction is not None and direction not in ("asc", "desc"):
        raise typer.BadParameter("direction must be 'asc' or 'desc'")
    pagination = PaginationAttributes(
        page=page, per=per, sort=sort, direction=direction, force_refresh=refresh
    )
    client = _make_client(token)
    display_channel(_run(lambda: client.channel(slug).get(pagination)))


@app.command("block")
def block_command(
    block_id: int = typer.Argument(..., help="ID of the block."),
    token: Optional[str] = TokenOption,
):
    """Show a single block."""
    client = _make_client(token)
    display_block(_run(client.block(block_id).get))


@app.command("search")
def search_command(
    query_string: str = typer.Argument(..., help="The search query string."),
    kind: str = typer.Option(
        "everything",
        "--kind",
        "-k",
        help="What to search: everything, users, channels or blocks.",
        case_sensitive=False,
    ),
    page: Optional[int] = typer.Option(None, "--page", "-p", help="Page to fetch."),
    per: Optional[int] = typer.Option(None, "--per", help="Results per page."),
    token: Optional[str] = TokenOption,
):
    """Search Are.na."""
    kind = kind.lower()
    if kind not in ("everything", "users", "channels", "blocks"):
        raise typer.BadParameter(
            "kind must be one of: everything, users, channels, blocks"
        )
    client = _make_client(token)
    search = getattr(client.search, kind)
    pagination = PaginationAttributes(page=page, per=per)
    display_search_results(_run(lambda: search(query_string, pagination)))


if __name__ == "__main__":
    app()
