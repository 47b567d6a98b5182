"""Domain models (Pydantic v2).

These models describe *what* a weather lookup is, not *how* it is performed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class WeatherQuery(BaseModel):
    """A single current-weather lookup collected from the prompts."""

    api_key: str = Field(
        ...,
        min_length=1,
        description="OpenWeather API key, sent as the `appid` query parameter.",
    )
    city: str = Field(
        ...,
        min_length=1,
        description="City name, sent as the `q` query parameter.",
    )
    units: str = Field(
        default="metric",
        min_length=1,
        description="Unit system requested from the API.",
    )

    def to_url(self, base_url: str) -> str:
        """Build the request URL, embedding the values verbatim."""

        return f"{base_url}?q={self.city}&appid={self.api_key}&units={self.units}"

    def redacted_url(self, base_url: str) -> str:
        """Same as `to_url` with the API key masked, for logs."""

        return self.model_copy(update={"api_key": "***"}).to_url(base_url)
