"""CLI commands for ionrpc.

Top-level commands (call, methods) plus the config command group.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from ionrpc import __logo__, __version__
from ionrpc.cli.command_groups.config_commands import register_config_commands
from ionrpc.cli.shared.config_utils import parse_value
from ionrpc.cli.shared.logging_utils import ensure_rotating_log_file
from ionrpc.config.access import get_client_config
from ionrpc.rpc.callspec import CALLSPEC, find_method, parse_signature
from ionrpc.rpc.client import IonRpcClient
from ionrpc.rpc.errors import IonRpcError

app = typer.Typer(
    name="ionrpc",
    help=f"{__logo__} ionrpc - ION daemon JSON-RPC client",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{__logo__} ionrpc v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
) -> None:
    """ionrpc - ION daemon JSON-RPC client."""
    pass


def build_client(
    *,
    host: str | None = None,
    port: int | None = None,
    user: str | None = None,
    password: str | None = None,
    protocol: str | None = None,
    logger: str | None = None,
) -> IonRpcClient:
    """Client from the config file with command-line overrides applied."""
    overrides: dict[str, Any] = {
        "host": host,
        "port": port,
        "user": user,
        "password": password,
        "protocol": protocol,
        "logger": logger,
    }
    options = {k: v for k, v in overrides.items() if v is not None}
    return IonRpcClient(get_client_config(), **options)


def prepare_cli_args(method: str, raw_args: list[str]) -> list[Any]:
    """Typed positions stay text for the coercers; the rest are parsed as JSON when possible."""
    declared = find_method(method)
    typed = len(parse_signature(CALLSPEC[declared])) if declared else 0
    return [raw if index < typed else parse_value(raw) for index, raw in enumerate(raw_args)]


@app.command()
def call(
    method: str = typer.Argument(..., help="RPC method, e.g. getBlockCount"),
    args: list[str] = typer.Argument(None, help="Positional params"),
    host: str = typer.Option(None, "--host", help="Daemon host"),
    port: int = typer.Option(None, "--port", help="Daemon RPC port"),
    user: str = typer.Option(None, "--user", "-u", help="RPC user"),
    password: str = typer.Option(None, "--password", "-p", help="RPC password"),
    protocol: str = typer.Option(None, "--protocol", help="http or https"),
    logger: str = typer.Option(None, "--logger", help="none | normal | debug"),
    log_file: str = typer.Option(None, "--log-file", help="Also log to ~/.ionrpc/logs/<name>.log"),
) -> None:
    """Call one RPC method and print the JSON reply."""
    if log_file:
        ensure_rotating_log_file(log_file)
    try:
        client = build_client(
            host=host,
            port=port,
            user=user,
            password=password,
            protocol=protocol,
            logger=logger,
        )
    except ValueError as exc:
        console.print(f"[red]Invalid settings:[/red] {exc}")
        raise typer.Exit(1)

    try:
        result = asyncio.run(client.call(method, *prepare_cli_args(method, args or [])))
    except IonRpcError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    console.print_json(json.dumps(result))


@app.command()
def methods(
    filter_text: str = typer.Option(None, "--filter", "-f", help="Case-insensitive name filter"),
) -> None:
    """List the RPC methods the client knows and their argument types."""
    table = Table(title="ION RPC methods")
    table.add_column("Method", style="cyan")
    table.add_column("Alias", style="dim")
    table.add_column("Arguments")
    needle = (filter_text or "").lower()
    for name, signature in CALLSPEC.items():
        if needle and needle not in name.lower():
            continue
        tags = " ".join(t.value for t in parse_signature(signature))
        table.add_row(name, name.lower(), tags or "-")
    console.print(table)


register_config_commands(app=app, console=console)


if __name__ == "__main__":
    app()
