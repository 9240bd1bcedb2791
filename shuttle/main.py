#!/usr/bin/env python3
"""
Main CLI entry point for shuttle
"""

import typer

from shuttle import __version__
from shuttle.commands import cache, config, launch
from shuttle.utils.logging_utils import setup_logging

app = typer.Typer(
    help="shuttle - search repositories, jobs and links, then open the one you pick.",
    no_args_is_help=True,
)


def version() -> None:
    """Show shuttle version"""
    typer.echo(f"shuttle version {__version__}")


def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    shuttle - interactive launcher

    Aggregates GitHub repositories, Jenkins jobs and URL lists into one
    searchable list.

    [bold]Examples:[/bold]

    Search and open:
        [cyan]shuttle run[/cyan]

    Print matching items:
        [cyan]shuttle list "api gateway"[/cyan]

    Force a reload from all providers:
        [cyan]shuttle cache clear[/cyan]
    """
    setup_logging(verbose)


app.callback()(main)
app.command()(launch.run)
app.command(name="list")(launch.list_items)
app.command()(version)
app.add_typer(cache.app, name="cache")
app.add_typer(config.app, name="config")


def run() -> None:
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
