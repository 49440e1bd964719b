"""Mini README: Entry point CLI for the flight dispatcher.

Commands:
    * run - start the FastAPI service with uvicorn.
    * board - print the international departures board for a saved feed.

Settings come from ``FLIGHTDISPATCHER_*`` environment variables or ``.env``;
command options override them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from flightdispatcher.airports import get_airport_directory
from flightdispatcher.board import DepartureBoard
from flightdispatcher.configuration import get_settings
from flightdispatcher.display import TimeMode
from flightdispatcher.logging_utils import configure_for_environment
from flightdispatcher.preferences import PreferenceStore

cli = typer.Typer(help="Browse international departures and open them in SimBrief.")


def _configure_logging() -> None:
    configure_for_environment(get_settings().environment)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the HTTP service using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    _configure_logging()

    # Browsers cannot open 0.0.0.0, so point operators at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Flight Dispatcher on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "flightdispatcher.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def board(
    feed_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Departures feed JSON."),
    icao: Optional[str] = typer.Option(None, help="Departure airport; defaults to the saved one."),
    mode: TimeMode = typer.Option(TimeMode.LOCAL, help="Clock used for times."),
    hour12: bool = typer.Option(True, "--hour12/--hour24", help="12 or 24 hour clock."),
) -> None:
    """Print the international departures contained in a feed file."""

    _configure_logging()
    settings = get_settings()
    store = PreferenceStore(settings.resolved_preferences_file)
    preferences = store.load()
    code = (icao or preferences.initial_airport).strip().upper()

    feed = json.loads(feed_file.read_text(encoding="utf-8"))
    dispatcher = DepartureBoard(
        get_airport_directory(settings.airports_file),
        preferences,
        segments=settings.route_segments,
    )
    try:
        snapshot = dispatcher.build(code, feed, mode=mode, hour12=hour12)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--icao") from error
    store.remember_airport(code)

    origin = snapshot.origin
    title = f"{code} - {origin.name}, {origin.city}" if origin else code
    typer.echo(title)
    for line in snapshot.lines:
        row = line.row
        due = line.due.label if line.due else ""
        typer.echo(
            f"{row.flight_number or '-':<9} {row.destination:<7} "
            f"{line.departure_text:<20} {due:<12} {line.arrival_text:<21} {line.duration_text:<7}"
        )
        typer.echo(f"    {line.simbrief_url}")
    typer.echo(f"Showing {len(snapshot.lines)} international flights")


if __name__ == "__main__":
    cli()
