"""Tests for the inference dispatcher.

Tests cover:
- Endpoint, body and headers per provider (and per modality for OpenAI)
- Pass-through of the upstream body, including text and binary bodies
- Unknown provider and missing credential failures
- Upstream errors propagating unchanged
"""

import base64
import json

import httpx
import pytest

from modelhub.errors import MissingCredentialError, UnsupportedProviderError
from modelhub.models.common import Modality, Provider
from modelhub.models.inference import InferenceRequest
from modelhub.services.inference_runner import BUILDERS, build_request, run_inference


def ok(body):
    return lambda request: httpx.Response(200, json=body)


def make_request(provider: str, modality: Modality | None = None, model_id: str = "test-model"):
    return InferenceRequest(
        model_id=model_id,
        provider=provider,
        input={"prompt": "test prompt"},
        modality=modality,
    )


class TestDispatchTable:
    """Tests for the URL/body/header shape built per provider."""

    def test_every_provider_has_a_builder(self):
        assert set(BUILDERS) == set(Provider)

    def test_huggingface(self, settings):
        upstream = build_request(make_request("huggingface"), settings)
        assert upstream.url == "https://api-inference.huggingface.co/models/test-model"
        assert upstream.json == {"prompt": "test prompt"}
        assert upstream.headers["Authorization"] == "Bearer hf-key"
        assert upstream.headers["Content-Type"] == "application/json"

    def test_replicate(self, settings):
        upstream = build_request(make_request("replicate"), settings)
        assert upstream.url == "https://api.replicate.com/v1/predictions"
        assert upstream.json == {"version": "test-model", "input": {"prompt": "test prompt"}}
        assert upstream.headers["Authorization"] == "Token rep-key"

    def test_stability(self, settings):
        upstream = build_request(make_request("stability"), settings)
        assert upstream.url == (
            "https://api.stability.ai/v1/generation/stable-diffusion-xl-1024-v1-0/text-to-image"
        )
        assert upstream.json == {"prompt": "test prompt"}
        assert upstream.headers["Authorization"] == "Bearer stab-key"

    @pytest.mark.parametrize(
        "modality,path",
        [
            (None, "/v1/chat/completions"),
            (Modality.TEXT, "/v1/chat/completions"),
            (Modality.MULTIMODAL, "/v1/chat/completions"),
            (Modality.IMAGE, "/v1/images/generations"),
            (Modality.AUDIO, "/v1/audio/transcriptions"),
        ],
    )
    def test_openai_endpoint_follows_modality(self, settings, modality, path):
        upstream = build_request(make_request("openai", modality, model_id="gpt-4"), settings)
        assert upstream.url == f"https://api.openai.com{path}"
        assert upstream.json == {"model": "gpt-4", "prompt": "test prompt"}
        assert upstream.headers["Authorization"] == "Bearer sk-openai"

    def test_openai_input_can_override_model(self, settings):
        request = InferenceRequest(model_id="gpt-4", provider="openai", input={"model": "other"})
        assert build_request(request, settings).json == {"model": "other"}

    def test_claude(self, settings):
        upstream = build_request(make_request("claude", model_id="claude-3-opus"), settings)
        assert upstream.url == "https://api.anthropic.com/v1/messages"
        assert upstream.json == {"model": "claude-3-opus", "prompt": "test prompt"}
        assert upstream.headers["x-api-key"] == "sk-ant"
        assert upstream.headers["anthropic-version"] == "2023-06-01"
        assert "Authorization" not in upstream.headers

    def test_gemini(self, settings):
        upstream = build_request(make_request("gemini", model_id="gemini-pro"), settings)
        assert upstream.url == (
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"
        )
        assert upstream.json == {"prompt": "test prompt"}
        assert upstream.headers["x-goog-api-key"] == "goog-key"


class TestRunInference:
    """Tests for the upstream call itself."""

    @pytest.mark.asyncio
    async def test_huggingface_inference(self, settings, mock_client):
        client, seen = mock_client(ok({"result": "test result"}))
        async with client:
            result = await run_inference(make_request("huggingface"), settings, client)

        assert result == {"result": "test result"}
        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert str(seen[0].url) == "https://api-inference.huggingface.co/models/test-model"
        assert json.loads(seen[0].content) == {"prompt": "test prompt"}
        assert seen[0].headers["authorization"] == "Bearer hf-key"

    @pytest.mark.asyncio
    async def test_replicate_inference(self, settings, mock_client):
        client, seen = mock_client(ok({"id": "abc", "status": "starting"}))
        async with client:
            result = await run_inference(make_request("replicate"), settings, client)

        assert result == {"id": "abc", "status": "starting"}
        assert json.loads(seen[0].content) == {
            "version": "test-model",
            "input": {"prompt": "test prompt"},
        }

    @pytest.mark.asyncio
    async def test_body_is_passed_through_unmodified(self, settings, mock_client):
        body = [{"generated_text": "hi", "score": 0.5, "nested": {"a": [1, None]}}]
        client, _ = mock_client(ok(body))
        async with client:
            result = await run_inference(make_request("huggingface"), settings, client)
        assert result == body

    @pytest.mark.asyncio
    async def test_binary_body_returned_as_data_uri(self, settings, mock_client):
        png = b"\x89PNG\r\n\x1a\n\x00\x00"
        client, _ = mock_client(
            lambda request: httpx.Response(200, content=png, headers={"content-type": "image/png"})
        )
        async with client:
            result = await run_inference(make_request("huggingface"), settings, client)
        assert result == "data:image/png;base64," + base64.b64encode(png).decode("ascii")

    @pytest.mark.asyncio
    async def test_text_body_returned_as_string(self, settings, mock_client):
        client, _ = mock_client(
            lambda request: httpx.Response(
                200, content=b"plain output", headers={"content-type": "text/plain; charset=utf-8"}
            )
        )
        async with client:
            result = await run_inference(make_request("huggingface"), settings, client)
        assert result == "plain output"

    @pytest.mark.asyncio
    async def test_unsupported_provider(self, settings, mock_client):
        client, seen = mock_client(ok({}))
        async with client:
            with pytest.raises(UnsupportedProviderError, match="Unsupported provider: unsupported"):
                await run_inference(make_request("unsupported"), settings, client)
        assert seen == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "provider,env_var",
        [
            ("huggingface", "HUGGINGFACE_API_KEY"),
            ("replicate", "REPLICATE_API_KEY"),
            ("stability", "STABILITY_API_KEY"),
            ("openai", "OPENAI_API_KEY"),
            ("claude", "ANTHROPIC_API_KEY"),
            ("gemini", "GOOGLE_API_KEY"),
        ],
    )
    async def test_missing_credential(self, bare_settings, mock_client, provider, env_var):
        client, seen = mock_client(ok({}))
        async with client:
            with pytest.raises(MissingCredentialError) as exc_info:
                await run_inference(make_request(provider), bare_settings, client)
        assert exc_info.value.env_var == env_var
        assert seen == []

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, settings, mock_client):
        client, seen = mock_client(lambda request: httpx.Response(503, json={"error": "loading"}))
        async with client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await run_inference(make_request("huggingface"), settings, client)
        assert exc_info.value.response.status_code == 503
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, settings, mock_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, seen = mock_client(refuse)
        async with client:
            with pytest.raises(httpx.ConnectError):
                await run_inference(make_request("openai"), settings, client)
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_repeated_calls_are_identical(self, settings, mock_client):
        client, seen = mock_client(ok({"choices": [{"text": "same"}]}))
        async with client:
            first = await run_inference(make_request("openai"), settings, client)
            second = await run_inference(make_request("openai"), settings, client)
        assert first == second
        assert seen[0].content == seen[1].content
