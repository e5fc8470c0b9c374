"""Typer-based CLI for running SRV discovery cycles by hand."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional

import typer
from injector import Injector
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from srv_discovery import __version__
from srv_discovery.cluster import ClusterNodesProvider
from srv_discovery.config import SrvDiscoveryConfig, load_config
from srv_discovery.exceptions import ResolverConfigurationError
from srv_discovery.models import DiscoveryNode
from srv_discovery.wiring import SrvDiscoveryModule

console = Console()
app = typer.Typer(help="DNS SRV cluster discovery CLI", no_args_is_help=True, pretty_exceptions_enable=False)


def init_logging(level: str = "INFO") -> None:
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"Unknown log level '{level}'")
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s: [%(name)s] %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%SZ',
        handlers=[logging.StreamHandler()],
        force=True,
    )


def _build_config(
    config_path: Optional[Path],
    query: Optional[str],
    servers: Optional[List[str]],
    protocol: Optional[str],
    postfix: Optional[str],
) -> SrvDiscoveryConfig:
    base = load_config(config_path)
    overrides = {
        "query": query,
        "servers": servers or None,
        "protocol": protocol,
        "consul_postfix": postfix,
    }
    values = base.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return SrvDiscoveryConfig(**values)


def _build_provider(config: SrvDiscoveryConfig) -> ClusterNodesProvider:
    injector = Injector([SrvDiscoveryModule(config)])
    return injector.get(ClusterNodesProvider)


def _render_nodes(nodes: List[DiscoveryNode], as_json: bool) -> None:
    if as_json:
        console.print_json(data=[node.model_dump() for node in nodes])
        return
    if not nodes:
        console.print("[yellow]No nodes found[/yellow]")
        return
    table = Table(title=f"Discovered nodes ({len(nodes)})")
    table.add_column("Node ID")
    table.add_column("Address")
    table.add_column("Version")
    for node in nodes:
        table.add_row(node.node_id, str(node.address), node.version)
    console.print(table)


@app.command()
def version() -> None:
    """Print the library version."""
    console.print(f"srv-discovery {__version__}")


@app.command()
def discover(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file."),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="SRV domain name to query."),
    server: Optional[List[str]] = typer.Option(None, "--server", "-s", help="Name server 'host[:port]', repeatable."),
    protocol: Optional[str] = typer.Option(None, "--protocol", help="'tcp' or 'udp'."),
    postfix: Optional[str] = typer.Option(None, "--consul-postfix", help="Suffix stripped from target hosts."),
    watch: bool = typer.Option(False, "--watch", "-w", help="Repeat discovery at --interval."),
    interval: float = typer.Option(5.0, "--interval", min=0.0, help="Seconds between cycles in watch mode."),
    cycles: Optional[int] = typer.Option(None, "--cycles", min=1, help="Stop watch mode after N cycles."),
    as_json: bool = typer.Option(False, "--json", help="Print nodes as JSON."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    """Run one discovery cycle (or several with --watch) and print the nodes."""
    try:
        init_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    try:
        settings = _build_config(config, query, server, protocol, postfix)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    try:
        provider = _build_provider(settings)
    except ResolverConfigurationError as exc:
        console.print(f"[red]{escape(exc.message)}[/red]")
        raise typer.Exit(code=2)

    completed = 0
    while True:
        _render_nodes(provider.discover_nodes(), as_json)
        completed += 1
        if not watch or (cycles is not None and completed >= cycles):
            break
        time.sleep(interval)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
