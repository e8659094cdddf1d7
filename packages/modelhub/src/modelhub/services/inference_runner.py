"""Inference dispatcher: one upstream POST per request, body passed through.

Each provider has a builder that turns an ``InferenceRequest`` into the
provider-specific URL, JSON body and auth headers. The upstream response body
is returned unchanged when it is JSON or text, and as a base64 data URI
when it is binary. Callers are expected to know the shape their provider
returns. Transport and HTTP errors propagate as raised by httpx.
"""

import base64
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from modelhub.config import Settings, get_settings
from modelhub.models.common import Modality, Provider
from modelhub.models.inference import InferenceRequest
from modelhub.services.http import JSON_HEADERS, http_client

logger = logging.getLogger(__name__)

STABILITY_ENGINE = "stable-diffusion-xl-1024-v1-0"
ANTHROPIC_VERSION = "2023-06-01"

# OpenAI multiplexes model families over different REST paths
OPENAI_PATHS: dict[Modality | None, str] = {
    Modality.IMAGE: "/v1/images/generations",
    Modality.AUDIO: "/v1/audio/transcriptions",
}
OPENAI_DEFAULT_PATH = "/v1/chat/completions"


@dataclass
class UpstreamRequest:
    """A fully built provider call."""

    url: str
    json: Any
    headers: dict[str, str] = field(default_factory=dict)


Builder = Callable[[InferenceRequest, str, Settings], UpstreamRequest]


def _huggingface(request: InferenceRequest, api_key: str, settings: Settings) -> UpstreamRequest:
    return UpstreamRequest(
        url=f"{settings.huggingface_inference_url}/models/{request.model_id}",
        json=request.input,
        headers={"Authorization": f"Bearer {api_key}"},
    )


def _replicate(request: InferenceRequest, api_key: str, settings: Settings) -> UpstreamRequest:
    return UpstreamRequest(
        url=f"{settings.replicate_api_url}/v1/predictions",
        json={"version": request.model_id, "input": request.input},
        headers={"Authorization": f"Token {api_key}"},
    )


def _stability(request: InferenceRequest, api_key: str, settings: Settings) -> UpstreamRequest:
    return UpstreamRequest(
        url=f"{settings.stability_api_url}/v1/generation/{STABILITY_ENGINE}/text-to-image",
        json=request.input,
        headers={"Authorization": f"Bearer {api_key}"},
    )


def _openai(request: InferenceRequest, api_key: str, settings: Settings) -> UpstreamRequest:
    path = OPENAI_PATHS.get(request.modality, OPENAI_DEFAULT_PATH)
    return UpstreamRequest(
        url=f"{settings.openai_api_url}{path}",
        json={"model": request.model_id, **request.input},
        headers={"Authorization": f"Bearer {api_key}"},
    )


def _claude(request: InferenceRequest, api_key: str, settings: Settings) -> UpstreamRequest:
    return UpstreamRequest(
        url=f"{settings.anthropic_api_url}/v1/messages",
        json={"model": request.model_id, **request.input},
        headers={"x-api-key": api_key, "anthropic-version": ANTHROPIC_VERSION},
    )


def _gemini(request: InferenceRequest, api_key: str, settings: Settings) -> UpstreamRequest:
    return UpstreamRequest(
        url=f"{settings.gemini_api_url}/v1beta/models/{request.model_id}:generateContent",
        json=request.input,
        headers={"x-goog-api-key": api_key},
    )


BUILDERS: dict[Provider, Builder] = {
    Provider.HUGGINGFACE: _huggingface,
    Provider.REPLICATE: _replicate,
    Provider.STABILITY: _stability,
    Provider.OPENAI: _openai,
    Provider.CLAUDE: _claude,
    Provider.GEMINI: _gemini,
}

_unrouted = set(Provider) - set(BUILDERS)
if _unrouted:
    raise RuntimeError(f"No inference builder for providers: {sorted(p.value for p in _unrouted)}")


def build_request(request: InferenceRequest, settings: Settings) -> UpstreamRequest:
    """Resolve provider and credential, then build the upstream call.

    Raises:
        UnsupportedProviderError: provider tag is not a known provider
        MissingCredentialError: the provider's API key is not configured
    """
    provider = Provider.parse(request.provider)
    api_key = settings.credential_for(provider)
    upstream = BUILDERS[provider](request, api_key, settings)
    upstream.headers = {**upstream.headers, **JSON_HEADERS}
    return upstream


def decode_body(response: httpx.Response) -> Any:
    """Return the upstream body in a JSON-serializable form.

    JSON bodies are decoded as-is and text bodies are returned as a string.
    Binary bodies (e.g. images from Hugging Face text-to-image models) become a
    base64 ``data:`` URI carrying the upstream content type.
    """
    content_type = response.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()
    if media_type == "application/json" or media_type.endswith("+json"):
        return response.json()
    if media_type.startswith("text/"):
        return response.text
    encoded = base64.b64encode(response.content).decode("ascii")
    return f"data:{media_type or 'application/octet-stream'};base64,{encoded}"


async def run_inference(
    request: InferenceRequest,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Send exactly one upstream inference call and return its body."""
    settings = settings or get_settings()
    upstream = build_request(request, settings)

    logger.info(f"Dispatching inference for {request.model_id} via {request.provider}")

    async with http_client(settings, client) as http:
        response = await http.post(upstream.url, json=upstream.json, headers=upstream.headers)
        response.raise_for_status()
        return decode_body(response)
