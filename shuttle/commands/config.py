"""
Configuration commands.
"""

import json

import typer
from rich.table import Table

from shuttle.config.settings import (
    ShuttleConfig,
    get_config_path,
    get_env_info,
    load_config,
    save_config,
)
from shuttle.exceptions import ConfigurationError
from shuttle.utils.output import console, err_console

app = typer.Typer(help="Configuration commands")

EXAMPLE_PROVIDERS = [
    {"type": "github", "organization": "my-org"},
    {"type": "jenkins", "endpoint": "https://ci.example.com"},
    {"type": "file", "path": "/tmp/urls"},
]


@app.command()
def show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the resolved configuration and environment variables."""
    try:
        config = load_config()
    except ConfigurationError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    if json_output:
        print(json.dumps(config.to_dict(), indent=2))
        return

    console.print(f"[bold]Config file:[/bold] {get_config_path()}")
    console.print(f"[bold]Cache file:[/bold] {config.cache_path}")
    console.print(f"[bold]Matcher:[/bold] {config.matcher}")
    console.print(f"[bold]HTTP timeout:[/bold] {config.http_timeout}s")

    table = Table(title="Providers", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Settings")
    for index, entry in enumerate(config.providers, 1):
        settings = ", ".join(f"{k}={v}" for k, v in entry.items() if k not in ("type", "token"))
        table.add_row(str(index), str(entry.get("type")), settings)
    console.print(table)

    env_table = Table(title="Environment", show_header=True, header_style="bold cyan")
    env_table.add_column("Variable", style="cyan")
    env_table.add_column("Value")
    env_table.add_column("Description", style="dim")
    for name, info in get_env_info().items():
        value = info["value"] if info["is_set"] else "[dim]unset[/dim]"
        if not info["valid"]:
            value = f"[red]{value} (invalid)[/red]"
        env_table.add_row(name, value, info["description"])
    console.print(env_table)


@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write an example configuration file."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        err_console.print(f"[yellow]{config_path} already exists (use --force)[/yellow]")
        raise typer.Exit(1)

    written = save_config(ShuttleConfig(providers=EXAMPLE_PROVIDERS), config_path)
    console.print(f"[green]✓ Wrote {written}[/green]")
