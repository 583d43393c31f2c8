"""Output formatters for CLI display."""

import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import Connection, RouteStopCount, TransferStation

console = Console()


def format_json(data: BaseModel | Sequence[Any] | dict[str, Any]) -> str:
    """Format a model, or a list/dict of models and plain values, as JSON."""

    def _dump(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump()
        if isinstance(value, dict):
            return {k: _dump(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [_dump(v) for v in value]
        return value

    return json.dumps(_dump(data), ensure_ascii=False, indent=2)


def format_routes_table(route_names: Sequence[str]) -> None:
    """Display route names as a rich table."""
    if not route_names:
        console.print("No subway routes found.")
        return

    table = Table(
        title="Subway Routes", show_header=True, header_style="bold magenta"
    )
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Route", style="cyan")

    for idx, name in enumerate(route_names, 1):
        table.add_row(str(idx), name)

    console.print(table)


def format_stops_table(route_stops: Sequence[tuple[str, Sequence[str]]]) -> None:
    """Display the stops of each route, one table per route."""
    if not route_stops:
        console.print("No subway routes found.")
        return

    for route_name, stop_names in route_stops:
        # Heading printed separately; a narrow table would wrap its title
        console.print(
            f"\n[bold cyan]{route_name}[/bold cyan] ({len(stop_names)} stops)"
        )
        table = Table(show_header=True, header_style="bold blue")
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("Stop", style="cyan")

        for idx, name in enumerate(stop_names, 1):
            table.add_row(str(idx), name)

        console.print(table)


def format_stop_names_table(stop_names: Sequence[str]) -> None:
    """Display a flat list of stop names."""
    console.print(f"[bold]Subway Stops ({len(stop_names)})[/bold]")
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Stop", style="cyan")
    for name in stop_names:
        table.add_row(name)

    console.print(table)


def format_stop_count(result: RouteStopCount | None, fewest: bool) -> None:
    """Display the route with the most or fewest stops."""
    quantifier = "shortest" if fewest else "longest"
    if result is None:
        console.print(f"[yellow]No {quantifier} subway route found[/yellow]")
        return

    console.print(
        f"The {quantifier} route is: [bold cyan]{result.route}[/bold cyan] "
        f"with [green]{result.stop_count}[/green] stops"
    )


def format_transfers_table(transfers: Sequence[TransferStation]) -> None:
    """Display transfer stations with the routes serving them."""
    if not transfers:
        console.print("No transfer stations found.")
        return

    table = Table(
        title="Stops with Transfers", show_header=True, header_style="bold magenta"
    )
    table.add_column("Stop", style="cyan")
    table.add_column("Routes", style="yellow")

    for station in transfers:
        table.add_row(station.name, ", ".join(station.routes))

    console.print(table)


def format_connection(connection: Connection) -> None:
    """Display the routes connecting two stops."""
    if not connection.found:
        console.print(
            f"[yellow]No connecting route from {connection.from_stop} "
            f"to {connection.to_stop}[/yellow]"
        )
        return

    lines = [
        f"[bold]From:[/bold] {connection.from_stop}",
        f"[bold]To:[/bold] {connection.to_stop}",
        f"[bold]Transfers:[/bold] {connection.transfer_count}",
        "",
    ]
    for idx, route in enumerate(connection.routes, 1):
        lines.append(f"{idx}. [cyan]{route}[/cyan]")

    console.print(Panel("\n".join(lines), title="Connection", border_style="blue"))
