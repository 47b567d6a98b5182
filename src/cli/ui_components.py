"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic away from visual details.
- Lets the header be rendered (and tested) without clearing a real terminal.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

TITLE = "WEATHER CONSOLE"
ATTRIBUTION = "Current conditions by OpenWeather ([link=https://openweathermap.org]openweathermap.org[/link])"


def build_header() -> Group:
    """Title banner plus attribution line."""

    title = Panel(
        Align.center(Text(TITLE, style="bold red"), vertical="middle"),
        border_style="red",
        padding=(1, 4),
    )
    attribution = Align.center(
        Panel(Text.from_markup(f"[red]{ATTRIBUTION}[/]"), expand=False),
    )
    return Group(title, attribution)
