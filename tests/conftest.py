"""Shared fixtures: explicit settings and httpx clients backed by MockTransport."""

from collections.abc import Callable

import httpx
import pytest

from modelhub.config import Settings

TEST_KEYS = {
    "huggingface_api_key": "hf-key",
    "replicate_api_key": "rep-key",
    "stability_api_key": "stab-key",
    "openai_api_key": "sk-openai",
    "anthropic_api_key": "sk-ant",
    "google_api_key": "goog-key",
}


@pytest.fixture
def settings() -> Settings:
    """Settings with every provider credential configured and no .env file."""
    return Settings(_env_file=None, **TEST_KEYS)


@pytest.fixture
def bare_settings() -> Settings:
    """Settings with no provider credentials."""
    return Settings(_env_file=None, **{name: "" for name in TEST_KEYS})


@pytest.fixture
def mock_client() -> Callable[..., tuple[httpx.AsyncClient, list[httpx.Request]]]:
    """Factory returning an AsyncClient routed to ``handler`` plus the list of requests it saw."""

    def factory(handler) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        async def _handle(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        return httpx.AsyncClient(transport=httpx.MockTransport(_handle)), seen

    return factory
