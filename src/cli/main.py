"""Interactive weather lookup.

Flow: ask for the API key, ask for the city, fetch the current weather once,
then show either the JSON payload in a panel or a red error line. Every
failure ends the run; nothing is retried.
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.markup import escape

from adapters.openweather import WeatherAPIError, fetch_current_weather
from cli import console_helper
from core.config import AppSettings
from core.domain.models import WeatherQuery
from core.log import configure_logging

app = typer.Typer(add_completion=False, help="Show the current weather for a city (OpenWeather).")

logger = logging.getLogger(__name__)


def report_weather(api_key: str, city: str, settings: AppSettings | None = None) -> None:
    """Fetch the weather for `city` and print the outcome."""

    settings = settings or AppSettings()
    query = WeatherQuery(api_key=api_key, city=city, units=settings.units)

    try:
        payload = fetch_current_weather(query, settings=settings)

        console_helper.show_header()
        console_helper.write_json(payload, escape(f"Weather in {city}"))
        console_helper.wait_for_exit("\nPress Enter to exit...")
    except WeatherAPIError as exc:
        console_helper.write_error_line(f"Error fetching weather data: {escape(exc.body)}")
    except Exception as exc:
        logger.debug("Weather lookup failed", exc_info=True)
        console_helper.write_error_line(f"Exception occurred: {escape(str(exc))}")


@app.command()
def weather() -> None:
    """Prompt for an API key and a city, then show the current weather."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    api_key = console_helper.get_string(
        "Please enter your OpenWeather API key:",
        show_header_first=True,
    )
    city = console_helper.get_string(
        "Please enter the city name:",
        settings.default_city,
        show_header_first=True,
    )

    report_weather(api_key, city, settings)


def run() -> None:
    # UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    app()
