"""Config command group (get/set/unset/show)."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from ionrpc.cli.shared.config_utils import (
    deep_get,
    deep_set,
    deep_unset,
    load_config_json,
    parse_value,
    save_config_json,
)
from ionrpc.config.access import clear_config_cache
from ionrpc.config.loader import get_config_path, load_config


def register_config_commands(app: typer.Typer, console: Console) -> None:
    """Register the config command group."""
    config_app = typer.Typer(help="Config helpers (get/set/unset/show)")
    app.add_typer(config_app, name="config")

    @config_app.command("get")
    def config_get(
        key: str = typer.Argument(..., help="Dotted key path, e.g. rpc.port"),
    ) -> None:
        data = load_config_json()
        try:
            value = deep_get(data, key)
        except KeyError:
            console.print(f"[red]Key not found:[/red] {key}")
            raise typer.Exit(1)
        console.print(json.dumps(value, indent=2, ensure_ascii=False))

    @config_app.command("set")
    def config_set(
        key: str = typer.Argument(..., help="Dotted key path"),
        value: str = typer.Argument(..., help="JSON value or plain string"),
    ) -> None:
        data = load_config_json()
        previous = json.loads(json.dumps(data))
        deep_set(data, key, parse_value(value))
        path = save_config_json(data)
        try:
            load_config(path)
        except ValueError as exc:
            save_config_json(previous, path)
            console.print(f"[red]Rejected:[/red] {exc}")
            raise typer.Exit(1)
        clear_config_cache(config_path=path)
        console.print(f"[green]✓[/green] Set {key}")

    @config_app.command("unset")
    def config_unset(
        key: str = typer.Argument(..., help="Dotted key path"),
    ) -> None:
        data = load_config_json()
        if not deep_unset(data, key):
            console.print(f"[yellow]Key not found:[/yellow] {key}")
            raise typer.Exit(1)
        path = save_config_json(data)
        clear_config_cache(config_path=path)
        console.print(f"[green]✓[/green] Unset {key}")

    @config_app.command("show")
    def config_show() -> None:
        """Show the effective RPC connection settings."""
        path = get_config_path()
        rpc = load_config(path).rpc
        table = Table(title=f"ionrpc config ({path})")
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for name, value in rpc.model_dump().items():
            shown = "********" if name == "password" else str(value)
            table.add_row(f"rpc.{name}", shown)
        console.print(table)
