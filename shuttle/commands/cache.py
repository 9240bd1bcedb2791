"""
Item cache commands.

The cache has no expiry; clearing it is how a fresh provider load is forced
on the next run.
"""

import typer

from shuttle.config.settings import get_cache_path
from shuttle.exceptions import CacheReadError
from shuttle.services.item_cache import ItemCache
from shuttle.utils.output import console

app = typer.Typer(help="Item cache management commands")


@app.command()
def path() -> None:
    """Print the location of the item cache."""
    print(get_cache_path())


@app.command()
def status() -> None:
    """Show whether a cache snapshot exists and how many items it holds."""
    cache = ItemCache(get_cache_path())
    if not cache.exists():
        console.print(f"[yellow]No cache at {cache.path}[/yellow]")
        return

    try:
        items = cache.load() or []
    except CacheReadError as e:
        console.print(f"[red]Cache is unreadable: {e}[/red]")
        raise typer.Exit(1) from e

    console.print(f"[green]{len(items)} items[/green] cached at {cache.path}")


@app.command()
def clear() -> None:
    """Delete the item cache so the next run reloads all providers."""
    cache = ItemCache(get_cache_path())
    if cache.clear():
        console.print(f"[green]✓ Cleared {cache.path}[/green]")
    else:
        console.print("[dim]No cache to clear[/dim]")
