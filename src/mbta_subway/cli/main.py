"""CLI main entry point for MBTA subway queries."""

import logging
import sys
from typing import Any

import click
from rich.console import Console

from .. import __version__
from ..core import (
    FetchError,
    MbtaClient,
    MbtaConfig,
    StopNotFoundError,
    ValidationError,
    build_stop_index,
    collect_stop_counts,
    connect_stops,
    find_route_by_stop_count,
    find_transfer_stations,
    list_route_names,
    list_stop_names,
)
from ..core.models import DEFAULT_BASE_URL
from .formatters import (
    format_connection,
    format_json,
    format_routes_table,
    format_stop_count,
    format_stop_names_table,
    format_stops_table,
    format_transfers_table,
)

console = Console()
error_console = Console(stderr=True)

output_format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--api-key",
    envvar="MBTA_API_KEY",
    help="MBTA API key (or set MBTA_API_KEY)",
)
@click.option(
    "--base-url",
    envvar="MBTA_BASE_URL",
    default=DEFAULT_BASE_URL,
    show_default=True,
    help="MBTA API root URL (or set MBTA_BASE_URL)",
)
@click.option(
    "--timeout",
    "-t",
    type=click.IntRange(min=1),
    default=30,
    help="Request timeout in seconds",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=1,
    help="Attempts per request on connection errors (1 = no retry)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str | None,
    base_url: str,
    timeout: int,
    max_attempts: int,
    verbose: bool,
) -> None:
    """MBTA Subway - Explore subway routes, stops and connections."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = MbtaConfig(
        base_url=base_url,
        api_key=api_key,
        timeout=timeout,
        max_attempts=max_attempts,
    )


def _fail(e: Exception, verbose: bool) -> None:
    """Report an error on stderr and exit with status 1."""
    if isinstance(e, FetchError):
        error_console.print(f"[red]Fetch error:[/red] {e}")
    elif isinstance(e, StopNotFoundError):
        error_console.print(f"[red]Unknown stop:[/red] {e}")
    elif isinstance(e, ValidationError):
        error_console.print(f"[red]Error:[/red] {e}")
    else:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
    sys.exit(1)


def _fetch_route_stops(client: MbtaClient) -> list[tuple[str, list[str]]]:
    """Fetch every subway route and its stop names, sequentially."""
    subway_routes = client.fetch_routes()
    return [
        (route.long_name, [stop.name for stop in route_stops])
        for route, route_stops in client.iter_route_stops(subway_routes)
    ]


@cli.command()
@output_format_option
@click.pass_obj
def routes(obj: dict[str, Any], output_format: str) -> None:
    """List the names of all subway routes.

    Examples:
        mbta-subway routes
        mbta-subway routes --format json
    """
    try:
        with console.status("[bold green]Fetching subway routes..."):
            client = MbtaClient(obj["config"])
            route_names = list_route_names(client.fetch_routes())

        if output_format == "json":
            click.echo(format_json(route_names))
        else:
            format_routes_table(route_names)

    except Exception as e:
        _fail(e, obj["verbose"])


@cli.command()
@output_format_option
@click.option("--unique", "-u", is_flag=True, help="List each stop name once")
@click.pass_obj
def stops(obj: dict[str, Any], output_format: str, unique: bool) -> None:
    """List the stops of every subway route.

    Examples:
        mbta-subway stops
        mbta-subway stops --unique --format json
    """
    try:
        with console.status("[bold green]Fetching subway stops..."):
            client = MbtaClient(obj["config"])
            route_stops = _fetch_route_stops(client)

        if unique:
            stop_names = list_stop_names(route_stops, unique=True)
            if output_format == "json":
                click.echo(format_json(stop_names))
            else:
                format_stop_names_table(stop_names)
        elif output_format == "json":
            click.echo(
                format_json(
                    [
                        {"route": route_name, "stops": stop_names}
                        for route_name, stop_names in route_stops
                    ]
                )
            )
        else:
            format_stops_table(route_stops)

    except Exception as e:
        _fail(e, obj["verbose"])


def _show_route_by_stop_count(
    obj: dict[str, Any], output_format: str, fewest: bool
) -> None:
    try:
        with console.status("[bold green]Counting stops on each route..."):
            client = MbtaClient(obj["config"])
            counts = collect_stop_counts(_fetch_route_stops(client))
            result = find_route_by_stop_count(counts, fewest=fewest)

        if output_format == "json":
            click.echo(format_json({"route": result}))
        else:
            format_stop_count(result, fewest=fewest)

    except Exception as e:
        _fail(e, obj["verbose"])


@cli.command()
@output_format_option
@click.pass_obj
def longest(obj: dict[str, Any], output_format: str) -> None:
    """Show the subway route with the most stops."""
    _show_route_by_stop_count(obj, output_format, fewest=False)


@cli.command()
@output_format_option
@click.pass_obj
def shortest(obj: dict[str, Any], output_format: str) -> None:
    """Show the subway route with the fewest stops."""
    _show_route_by_stop_count(obj, output_format, fewest=True)


@cli.command()
@output_format_option
@click.pass_obj
def transfers(obj: dict[str, Any], output_format: str) -> None:
    """List all stops that are served by more than one route."""
    try:
        with console.status("[bold green]Finding transfer stations..."):
            client = MbtaClient(obj["config"])
            index = build_stop_index(_fetch_route_stops(client), build_adjacency=False)
            stations = find_transfer_stations(index)

        if output_format == "json":
            click.echo(format_json(stations))
        else:
            format_transfers_table(stations)

    except Exception as e:
        _fail(e, obj["verbose"])


@cli.command()
@click.argument("from_stop")
@click.argument("to_stop")
@output_format_option
@click.pass_obj
def connect(
    obj: dict[str, Any], from_stop: str, to_stop: str, output_format: str
) -> None:
    """Find the routes to ride between two stops.

    Examples:
        mbta-subway connect "Davis" "Kendall/MIT"
        mbta-subway connect "Ashmont" "Arlington" --format json
    """
    try:
        if not from_stop.strip():
            raise ValidationError("Starting stop name cannot be empty")
        if not to_stop.strip():
            raise ValidationError("Destination stop name cannot be empty")

        with console.status(
            f"[bold green]Finding connection from {from_stop} to {to_stop}..."
        ):
            client = MbtaClient(obj["config"])
            index = build_stop_index(_fetch_route_stops(client), build_adjacency=True)
            connection = connect_stops(index, from_stop, to_stop)

        if output_format == "json":
            click.echo(format_json(connection))
        else:
            format_connection(connection)

    except Exception as e:
        _fail(e, obj["verbose"])


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@click.pass_obj
def show_config(obj: dict[str, Any]) -> None:
    """Show the effective configuration."""
    settings: MbtaConfig = obj["config"]
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• Base URL: {settings.base_url}")
    console.print(f"• API key: {settings.masked_api_key()}")
    console.print(f"• Timeout: {settings.timeout} seconds")
    console.print(f"• Max attempts: {settings.max_attempts}")


if __name__ == "__main__":
    cli()
