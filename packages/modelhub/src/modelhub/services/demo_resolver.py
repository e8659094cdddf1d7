"""Demo-URL resolver: best-effort link to a live demo or docs for a model.

Live lookups (Hugging Face, Replicate) always fall back to the canonical model
page, so a transient upstream failure still yields a usable URL. Only an
unknown provider tag raises.
"""

import logging
from typing import Any

import httpx

from modelhub.config import Settings, get_settings
from modelhub.models.common import Provider
from modelhub.models.demo import DemoURLRequest
from modelhub.services.http import http_client
from modelhub.services.hub_client import LOOKUP_ERRORS, fetch_huggingface_model, fetch_replicate_model

logger = logging.getLogger(__name__)

STABILITY_DOCS_URL = "https://platform.stability.ai/docs/api-reference"
OPENAI_IMAGES_GUIDE_URL = "https://platform.openai.com/docs/guides/images"
OPENAI_MODELS_DOCS_URL = "https://platform.openai.com/docs/models"
CLAUDE_DOCS_URL = "https://docs.anthropic.com/claude/docs/models-overview"
GEMINI_DOCS_URL = "https://ai.google.dev/docs/gemini_api"

OPENAI_IMAGE_MODEL_PREFIXES = ("dall-e", "gpt-image")


def _first_space_url(data: dict[str, Any], hub_url: str) -> str | None:
    """URL of the first Space listed for a model, if any.

    The Hub lists Spaces as ids; objects with an explicit ``url`` are accepted too.
    Anything else is treated as no Space.
    """
    spaces = data.get("spaces")
    if not isinstance(spaces, list) or not spaces:
        return None
    first = spaces[0]
    if isinstance(first, str) and first:
        return f"{hub_url}/spaces/{first}"
    if isinstance(first, dict):
        url = first.get("url")
        if isinstance(url, str) and url:
            return url
        space_id = first.get("id")
        if isinstance(space_id, str) and space_id:
            return f"{hub_url}/spaces/{space_id}"
    return None


async def huggingface_demo_url(model_id: str, settings: Settings, client: httpx.AsyncClient) -> str:
    fallback = f"{settings.huggingface_hub_url}/{model_id}"
    try:
        data = await fetch_huggingface_model(client, model_id, settings)
        space_url = _first_space_url(data, settings.huggingface_hub_url)
    except LOOKUP_ERRORS as e:
        logger.warning(f"Error fetching HuggingFace demo for {model_id}: {e}")
        return fallback
    return space_url or fallback


async def replicate_demo_url(model_id: str, settings: Settings, client: httpx.AsyncClient) -> str:
    fallback = f"https://replicate.com/{model_id}"
    try:
        data = await fetch_replicate_model(client, model_id, settings)
    except LOOKUP_ERRORS as e:
        logger.warning(f"Error fetching Replicate demo for {model_id}: {e}")
        return fallback
    url = data.get("url")
    return url if isinstance(url, str) and url else fallback


def openai_docs_url(model_id: str) -> str:
    """Image-generation models go to the images guide, others to their model page."""
    if model_id.startswith(OPENAI_IMAGE_MODEL_PREFIXES):
        return OPENAI_IMAGES_GUIDE_URL
    return f"{OPENAI_MODELS_DOCS_URL}/{model_id}"


async def fetch_demo_url(
    request: DemoURLRequest,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Return a demo or documentation URL for a model.

    Raises:
        UnsupportedProviderError: provider tag is not a known provider
    """
    provider = Provider.parse(request.provider)
    settings = settings or get_settings()
    model_id = request.model_id

    if provider is Provider.HUGGINGFACE:
        async with http_client(settings, client) as http:
            return await huggingface_demo_url(model_id, settings, http)
    if provider is Provider.REPLICATE:
        async with http_client(settings, client) as http:
            return await replicate_demo_url(model_id, settings, http)
    if provider is Provider.STABILITY:
        return STABILITY_DOCS_URL
    if provider is Provider.OPENAI:
        return openai_docs_url(model_id)
    if provider is Provider.CLAUDE:
        return CLAUDE_DOCS_URL
    if provider is Provider.GEMINI:
        return GEMINI_DOCS_URL
    raise AssertionError(f"Unhandled provider: {provider}")
