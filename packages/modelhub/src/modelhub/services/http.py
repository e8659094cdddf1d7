"""Shared httpx client handling for provider calls."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from modelhub.config import Settings

JSON_HEADERS = {"Content-Type": "application/json"}


@asynccontextmanager
async def http_client(
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client, or a short-lived one closed on exit.

    Timeouts come from ``settings.http_timeout``; ``None`` leaves calls unbounded.
    """
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=settings.http_timeout) as owned:
        yield owned
