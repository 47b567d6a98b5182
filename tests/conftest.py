"""
Pytest configuration and fixtures.
Terminal I/O goes through a recording Console, HTTP through httpx.MockTransport.
"""

import io
from typing import Callable

import httpx
import pytest
from rich.console import Console

from adapters import http_client, openweather
from cli import console_helper
from core.config import AppSettings


@pytest.fixture
def console(monkeypatch) -> Console:
    """Recording console installed as the helper's output."""
    recording = Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)
    monkeypatch.setattr(console_helper, "_console", recording)
    return recording


@pytest.fixture
def output(console: Console) -> Callable[[], str]:
    """Everything printed so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def answers(console: Console, monkeypatch) -> Callable[..., None]:
    """Queue the lines the user will type, one per `input` call."""

    def _feed(*lines: str) -> None:
        replies = iter(lines)
        monkeypatch.setattr(console, "input", lambda *args, **kwargs: next(replies))

    return _feed


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        weather_base_url="https://api.test/data/2.5/weather",
        units="metric",
        default_city="Pforzheim",
    )


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_api(monkeypatch, requests_seen) -> Callable[..., list[httpx.Client]]:
    """Route the adapter's client through a mock transport.

    Returns the list of clients built, so tests can check they were closed.
    """

    def _install(handler: Callable[[httpx.Request], httpx.Response]) -> list[httpx.Client]:
        clients: list[httpx.Client] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        def fake_build_client(settings=None):
            client = http_client.build_client(settings, transport=httpx.MockTransport(recording_handler))
            clients.append(client)
            return client

        monkeypatch.setattr(openweather, "build_client", fake_build_client)
        return clients

    return _install
