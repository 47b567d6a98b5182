"""Core configuration.

Why here:
- Centralizes operational knobs (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP) read the same settings consistently.

User inputs (API key, city) are never read from here: they always come from
the interactive prompts.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class AppSettings(BaseSettings):
    """Central application configuration.

    Values may be overridden with `WEATHER_CONSOLE_*` environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_CONSOLE_",
        extra="ignore",
        case_sensitive=False,
    )

    weather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        min_length=8,
        description="OpenWeather current-weather endpoint.",
    )
    units: str = Field(
        default="metric",
        min_length=1,
        description="Unit system requested from OpenWeather (metric/imperial/standard).",
    )
    default_city: str = Field(
        default="Pforzheim",
        min_length=1,
        description="City offered as the default answer to the city prompt.",
    )
    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout per request (seconds). Same as the httpx default.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Minimum level for log records sent to stderr.",
    )
