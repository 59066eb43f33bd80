# src/arena_client/cli/display.py

"""Display and formatting utilities for CLI output."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from arena_client.models import (
    Block,
    ChannelWithDetails,
    ConnectedBlock,
    ConnectedChannel,
    SearchResults,
    UserWithDetails,
)

console = Console()


def describe_item(item: Block | ConnectedBlock | ConnectedChannel) -> str:
    """One-line label for a block or channel in a listing.

    Args:
        item: A block or a channel taken from a channel's contents.

    Returns:
        The item's kind followed by its best available title.
    """
    if item.is_channel():
        return f"Channel: {item.title or item.slug}"
    title = item.title or item.generated_title or "Untitled"
    return f"{item.class_}: {title}"


def display_user(user: UserWithDetails) -> None:
    """Displays a user's profile counters in a Panel."""
    lines = [
        f"[bold cyan]ID:[/bold cyan] [dim]{user.id}[/dim]",
        f"[bold cyan]Slug:[/bold cyan] {user.slug}",
        f"[bold cyan]Channels:[/bold cyan] {user.channel_count or 0}",
        f"[bold cyan]Followers:[/bold cyan] {user.follower_count or 0}",
        f"[bold cyan]Following:[/bold cyan] {user.following_count or 0}",
    ]
    console.print(
        Panel(
            "\n".join(lines),
            title=f"[bold]{user.username or user.slug}[/bold]",
            border_style="cyan",
            expand=False,
        )
    )


def display_channel(channel: ChannelWithDetails) -> None:
    """Displays a channel header followed by a table of its contents.

    Args:
        channel: The channel to show. Contents are listed only if fetched.
    """
    console.print(
        Panel(
            f"[bold cyan]Slug:[/bold cyan] {channel.slug}\n"
            f"[bold cyan]Status:[/bold cyan] {channel.status}\n"
            f"[bold cyan]Items:[/bold cyan] {channel.length or 0}",
            title=f"[bold]{channel.title}[/bold]",
            border_style="green",
            expand=False,
        )
    )

    if not channel.contents:
        console.print("[yellow]No contents.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold", border_style="dim")
    table.add_column("Position", justify="right")
    table.add_column("ID", style="dim")
    table.add_column("Item")
    for item in channel.contents:
        position = "" if item.position is None else str(item.position)
        table.add_row(position, str(item.id), describe_item(item))
    console.print(table)


def display_block(block: Block) -> None:
    """Displays a block and the text or link it carries."""
    body = block.content or block.description or ""
    if block.source and block.source.url:
        body = f"[link={block.source.url}]{block.source.url}[/link]\n{body}"
    console.print(
        Panel(
            body.strip() or "[dim]No text content.[/dim]",
            title=f"[bold]{describe_item(block)}[/bold]",
            subtitle=f"[dim]{block.id} | {block.state}[/dim]",
            border_style="blue",
            expand=False,
        )
    )


def display_search_results(results: SearchResults) -> None:
    """Displays matching channels, blocks and users, one table per kind.

    Args:
        results: The search response to render.
    """
    console.print(
        Panel(
            f"[bold cyan]Search Query:[/bold cyan] {results.term}",
            expand=False,
            border_style="dim",
        )
    )
    if not (results.channels or results.blocks or results.users):
        console.print("[yellow]No results found.[/yellow]")
        return

    if results.channels:
        table = Table(title="Channels", header_style="bold")
        table.add_column("Slug")
        table.add_column("Title")
        table.add_column("Items", justify="right")
        for channel in results.channels:
            table.add_row(channel.slug, channel.title, str(channel.length or 0))
        console.print(table)

    if results.blocks:
        table = Table(title="Blocks", header_style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Block")
        for block in results.blocks:
            table.add_row(str(block.id), describe_item(block))
        console.print(table)

    if results.users:
        table = Table(title="Users", header_style="bold")
        table.add_column("Slug")
        table.add_column("Name")
        for user in results.users:
            table.add_row(user.slug, user.username)
        console.print(table)
