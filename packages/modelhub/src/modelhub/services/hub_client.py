"""Model info lookups on the Hugging Face Hub and Replicate."""

from typing import Any

import httpx

from modelhub.config import Settings
from modelhub.models.common import Provider

# httpx raises InvalidURL outside the HTTPError hierarchy, e.g. for ids with control characters
LOOKUP_ERRORS = (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError)


async def fetch_huggingface_model(
    client: httpx.AsyncClient,
    model_id: str,
    settings: Settings,
) -> dict[str, Any]:
    """GET /api/models/{model_id} from the Hugging Face Hub.

    The token is optional for public models and sent only when configured.
    """
    headers = {}
    api_key = settings.api_key(Provider.HUGGINGFACE)
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"

    response = await client.get(f"{settings.huggingface_hub_url}/api/models/{model_id}", headers=headers)
    response.raise_for_status()
    return _json_object(response)


async def fetch_replicate_model(
    client: httpx.AsyncClient,
    model_id: str,
    settings: Settings,
) -> dict[str, Any]:
    """GET /v1/models/{owner}/{name} from Replicate."""
    headers = {}
    api_key = settings.api_key(Provider.REPLICATE)
    if api_key:
        headers["Authorization"] = f"Token {api_key}"

    response = await client.get(f"{settings.replicate_api_url}/v1/models/{model_id}", headers=headers)
    response.raise_for_status()
    return _json_object(response)


def _json_object(response: httpx.Response) -> dict[str, Any]:
    data = response.json()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object from {response.request.url}, got {type(data).__name__}")
    return data
