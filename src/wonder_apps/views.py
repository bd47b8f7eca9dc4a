"""Rich renderables for each screen."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from .flow import Exited, Result, Select, Welcome
from .geo import DistanceReport
from .landmarks import list_wonders
from .models import Joke

WELCOME_TITLE = "Welcome to Wonder Distance"


def result_headline(report: DistanceReport) -> str:
    return f"You are {report.kilometres:.2f} km ({report.miles:.2f} miles) from {report.wonder.name}"


def football_fields_line(report: DistanceReport) -> str:
    return f"That's about {report.football_fields:.0f} football fields!"


def selection_prompt(place_name: str) -> str:
    return f"Hello from {place_name}! Pick a wonder to calculate distance:"


def render_welcome(state: Welcome) -> RenderableType:
    parts: list[RenderableType] = [Text(WELCOME_TITLE, style="bold")]
    if state.notice:
        parts.append(Text(state.notice, style="yellow"))
    parts.append(Text("[s] Get Started   [q] Exit", style="dim"))
    return Panel(Group(*parts), expand=False)


def wonder_table() -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Wonder")
    table.add_column("Lat", justify="right")
    table.add_column("Lon", justify="right")
    for position, wonder in enumerate(list_wonders(), start=1):
        table.add_row(str(position), wonder.name, f"{wonder.latitude:.4f}", f"{wonder.longitude:.4f}")
    return table


def render_select(state: Select) -> RenderableType:
    return Group(Text(selection_prompt(state.place_name), style="bold"), wonder_table())


def render_report(report: DistanceReport) -> RenderableType:
    return Group(
        Text(result_headline(report), style="bold"),
        Text(football_fields_line(report)),
    )


def render_result(state: Result) -> RenderableType:
    return Panel(
        Group(
            render_report(state.report()),
            Text(""),
            Text("Would you like to calculate for a new location?"),
            Text("[y] Yes   [n] No", style="dim"),
        ),
        expand=False,
    )


def render_state(state: Welcome | Select | Result | Exited) -> RenderableType:
    if isinstance(state, Welcome):
        return render_welcome(state)
    if isinstance(state, Select):
        return render_select(state)
    if isinstance(state, Result):
        return render_result(state)
    return Text("Goodbye!")


def render_joke(joke: Joke | None, *, loading: bool) -> RenderableType:
    if loading:
        return Spinner("dots", text="Loading joke...")
    return Group(
        Text(joke.setup if joke else "No setup", style="bold"),
        Text(joke.punchline if joke else "No punchline", style="grey50"),
    )
