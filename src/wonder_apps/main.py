"""CLI startup entrypoint for Wonder Apps."""

from __future__ import annotations

import asyncio

import typer
from rich import print
from rich.console import Console
from rich.live import Live
from rich.prompt import Confirm, Prompt

from wonder_apps.app import WonderDistanceApp
from wonder_apps.config import settings
from wonder_apps.flow import Result, Select, Welcome, WonderFlow
from wonder_apps.geo import DistanceReport
from wonder_apps.geocoding import DisabledReverseGeocoder, NominatimReverseGeocoder, ReverseGeocoder
from wonder_apps.jokes import JokeClient, load_joke
from wonder_apps.landmarks import WONDERS, get_wonder, wonder_by_index
from wonder_apps.location import IpLocationProvider, LocationProvider, StaticLocationProvider
from wonder_apps.models import Coordinate, Landmark
from wonder_apps.telemetry import LoggingTelemetry, configure_logging
from wonder_apps.views import render_joke, render_report, render_state, wonder_table

app = typer.Typer(help="Wonder Distance and Joke Viewer")
console = Console()


class _ConsolePermissionAuthorizer:
    """Asks for location access on the terminal."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def request_permission(self) -> bool:
        return Confirm.ask("Allow Wonder Distance to use your location?", console=self._console)


def _coordinate_or_bad_parameter(lat: float, lon: float, param_hint: str | None = None) -> Coordinate:
    try:
        return Coordinate(lat, lon)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=param_hint) from exc


def _resolve_wonder(value: str) -> Landmark:
    if value.strip().isdigit():
        try:
            return wonder_by_index(int(value))
        except IndexError as exc:
            raise typer.BadParameter(str(exc)) from exc

    wonder = get_wonder(value)
    if wonder is None:
        names = ", ".join(w.name for w in WONDERS)
        raise typer.BadParameter(f"Unknown wonder {value!r}. Choose one of: {names}")
    return wonder


def _build_location_provider(lat: float | None = None, lon: float | None = None) -> LocationProvider:
    if lat is not None and lon is not None:
        return StaticLocationProvider(coordinate=_coordinate_or_bad_parameter(lat, lon))

    if settings.location_backend.lower() == "static":
        coordinate = None
        if settings.static_latitude is not None and settings.static_longitude is not None:
            coordinate = _coordinate_or_bad_parameter(
                settings.static_latitude,
                settings.static_longitude,
                param_hint="WONDER_STATIC_LATITUDE/WONDER_STATIC_LONGITUDE",
            )
        return StaticLocationProvider(coordinate=coordinate)

    return IpLocationProvider(
        settings.ip_location_url,
        timeout_seconds=settings.http_timeout_seconds,
        user_agent=settings.geocoding_user_agent,
    )


def _build_geocoder(enabled: bool = True) -> ReverseGeocoder:
    if not (enabled and settings.geocoding_enabled):
        return DisabledReverseGeocoder()
    return NominatimReverseGeocoder(
        settings.nominatim_base_url,
        user_agent=settings.geocoding_user_agent,
        timeout_seconds=settings.http_timeout_seconds,
    )


def _build_wonder_app(lat: float | None, lon: float | None, geocode: bool) -> WonderDistanceApp:
    return WonderDistanceApp(
        provider=_build_location_provider(lat, lon),
        authorizer=_ConsolePermissionAuthorizer(console),
        geocoder=_build_geocoder(enabled=geocode),
        flow=WonderFlow(telemetry=LoggingTelemetry()),
    )


@app.callback()
def _configure(log_level: str = typer.Option(None, help="Override WONDER_LOG_LEVEL")) -> None:
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


@app.command()
def start() -> None:
    """Show runtime backend configuration."""
    print(
        {
            "app_name": settings.app_name,
            "location_backend": settings.location_backend,
            "geocoding_enabled": settings.geocoding_enabled,
            "joke_api_base_url": settings.joke_api_base_url,
        }
    )


@app.command()
def wonders() -> None:
    """List the wonders available for distance calculation."""
    console.print(wonder_table())


@app.command()
def distance(
    lat: float = typer.Option(..., help="Your latitude in degrees"),
    lon: float = typer.Option(..., help="Your longitude in degrees"),
    wonder: str = typer.Option(..., help="Wonder name or menu number"),
) -> None:
    """Print the great-circle distance from a coordinate to a wonder."""
    user = _coordinate_or_bad_parameter(lat, lon)
    report = DistanceReport.between(user, _resolve_wonder(wonder))
    console.print(render_report(report))


@app.command("wonder")
def wonder_session(
    lat: float = typer.Option(None, help="Use this latitude instead of looking up your location"),
    lon: float = typer.Option(None, help="Use this longitude instead of looking up your location"),
    geocode: bool = typer.Option(True, help="Look up the name of your town"),
) -> None:
    """Run the interactive Wonder Distance session."""
    if (lat is None) != (lon is None):
        raise typer.BadParameter("Provide both --lat and --lon, or neither")

    session = _build_wonder_app(lat, lon, geocode)
    choices = [str(position) for position in range(1, len(WONDERS) + 1)]

    while not session.flow.closed:
        state = session.state
        console.print(render_state(state))

        if isinstance(state, Welcome):
            action = Prompt.ask("Choose", choices=["s", "q"], default="s", console=console)
            if action == "q":
                session.exit()
            else:
                console.print("Locating you...", style="dim")
                asyncio.run(session.start())
        elif isinstance(state, Select):
            picked = Prompt.ask("Wonder number", choices=choices, console=console)
            session.choose(wonder_by_index(int(picked)))
        elif isinstance(state, Result):
            if Confirm.ask("Calculate again?", console=console):
                session.restart()
            else:
                session.exit()

    console.print(render_state(session.state))


@app.command()
def joke() -> None:
    """Fetch and show one joke."""
    client = JokeClient(settings.joke_api_base_url, timeout_seconds=settings.http_timeout_seconds)
    with Live(render_joke(None, loading=True), console=console, transient=True):
        fetched = asyncio.run(load_joke(client))
    console.print(render_joke(fetched, loading=False))


if __name__ == "__main__":
    app()
