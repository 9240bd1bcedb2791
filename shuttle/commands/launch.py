"""
Launch commands: the interactive launcher and its non-interactive listing.
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from shuttle.config.settings import load_config
from shuttle.exceptions import ShuttleError
from shuttle.services.launcher import open_target
from shuttle.ui.commands import AppendText
from shuttle.ui.session import SearchSession
from shuttle.utils.output import console, err_console, print_json

from ._helpers import make_loader, resolve_matcher


def run(
    matcher: Optional[str] = typer.Option(
        None, "--matcher", "-m", help="Matcher to use (simple, fuzzy)"
    ),
    refresh: bool = typer.Option(
        False, "--refresh", "-r", help="Ignore the cache and reload all providers"
    ),
    no_open: bool = typer.Option(
        False, "--no-open", help="Print the selected value instead of opening it"
    ),
) -> None:
    """Search the aggregated items interactively and open the selection."""
    from shuttle.ui.launcher_app import run_launcher

    try:
        config = load_config()
        active_matcher = resolve_matcher(config, matcher)
        loader = make_loader(config, refresh)
    except ShuttleError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    value = run_launcher(active_matcher, loader)
    if value is None:
        raise typer.Exit(1)

    print(value)
    if not no_open:
        open_target(value)


def list_items(
    query: str = typer.Argument("", help="Query to filter by"),
    matcher: Optional[str] = typer.Option(
        None, "--matcher", "-m", help="Matcher to use (simple, fuzzy)"
    ),
    refresh: bool = typer.Option(
        False, "--refresh", "-r", help="Ignore the cache and reload all providers"
    ),
    limit: int = typer.Option(0, "--limit", "-n", help="Show at most N items (0 for all)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Load the items and print the ones matching QUERY."""
    try:
        config = load_config()
        session = SearchSession(resolve_matcher(config, matcher))
        session.load(make_loader(config, refresh)())
    except ShuttleError as e:
        err_console.print(f"[red]Error loading items: {e}[/red]")
        raise typer.Exit(1) from e

    if query:
        session.apply(AppendText(query))
    snapshot = session.snapshot()
    items = snapshot.filtered[:limit] if limit > 0 else snapshot.filtered

    if json_output:
        print_json([item.to_dict() for item in items])
        return

    if not items:
        console.print("[yellow]No matching items[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Label", style="cyan")
    table.add_column("Value")
    for item in items:
        table.add_row(escape(item.label), escape(item.value))
    console.print(table)
    console.print(f"[dim]{snapshot.status_text}[/dim]")
