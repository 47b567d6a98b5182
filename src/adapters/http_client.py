"""Wrapper around httpx.

Why a wrapper:
- Standardizes timeouts and headers for every outgoing request.
- Makes testing easy: the builder can be swapped for a client on a mock transport.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the configured timeout.

    No custom headers are sent; the caller owns the client and should use it
    as a context manager so it is closed on every path.
    """

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        transport=transport,
    )
