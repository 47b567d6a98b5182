"""OpenWeather adapter: current weather for a city.

One GET per call, no retries. A non-2xx answer is raised as `WeatherAPIError`
with the raw body so the CLI can show exactly what the API said.
"""

from __future__ import annotations

import logging
from typing import Any

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import WeatherQuery

logger = logging.getLogger(__name__)


class WeatherAPIError(Exception):
    """Raised when the weather API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Weather API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


def fetch_current_weather(query: WeatherQuery, *, settings: AppSettings | None = None) -> Any:
    """Fetch and parse the current weather for `query`.

    Raises:
        WeatherAPIError: the API answered with a non-2xx status.
        httpx.HTTPError: the request could not be completed.
        ValueError: the success body is not valid JSON.
    """

    settings = settings or AppSettings()
    url = query.to_url(settings.weather_base_url)
    logger.debug("GET %s", query.redacted_url(settings.weather_base_url))

    with build_client(settings) as client:
        response = client.get(url)
        logger.debug("OpenWeather answered HTTP %s", response.status_code)

        if not response.is_success:
            raise WeatherAPIError(response.status_code, response.text)
        return response.json()
