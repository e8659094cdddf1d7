"""Metadata comparator: resolve model metadata and project requested metrics.

Hugging Face models are looked up live on the Hub; OpenAI, Claude and Gemini
models come from the static catalog. Each model resolves independently and
concurrently, and a failed lookup degrades to the all-default record for that
model only.
"""

import asyncio
import logging
from typing import Any

import httpx

from modelhub.catalog import FAMILIES, detect_family
from modelhub.config import Settings, get_settings
from modelhub.errors import InvalidMetricError, InvalidRequestError
from modelhub.models.common import VALID_METRICS, Provider
from modelhub.models.compare import Capabilities, CompareRequest, Cost, ModelMetadata
from modelhub.services.http import http_client
from modelhub.services.hub_client import LOOKUP_ERRORS, fetch_huggingface_model

logger = logging.getLogger(__name__)


def validate_compare_request(request: CompareRequest) -> None:
    """Check that models and metrics are non-empty and every metric is known.

    Raises:
        InvalidRequestError: models or metrics is empty
        InvalidMetricError: one or more metric names are unknown (all are listed)
    """
    if not request.models:
        raise InvalidRequestError("Invalid request: models must be a non-empty array")
    if not request.metrics:
        raise InvalidRequestError("Invalid request: metrics must be a non-empty array")

    invalid = [metric for metric in request.metrics if metric not in VALID_METRICS]
    if invalid:
        raise InvalidMetricError(invalid, VALID_METRICS)


def metadata_from_hub(model_id: str, data: dict[str, Any]) -> ModelMetadata:
    """Derive a metadata record from a Hugging Face Hub model-info response.

    Downloads stand in for latency and likes for popularity. Hosted open
    models are free, so cost is always zero.
    """
    pipeline_tag = data.get("pipeline_tag")
    tags = data.get("tags") or []

    return ModelMetadata(
        id=model_id,
        modality=pipeline_tag or "unknown",
        latency=data.get("downloads") or 0,
        popularity=data.get("likes") or 0,
        cost=Cost(input=0, output=0),
        capabilities=Capabilities(
            text=pipeline_tag == "text-generation",
            image=pipeline_tag == "image-generation",
            audio=pipeline_tag == "audio-to-text",
            video=False,
            multimodal="multimodal" in tags,
        ),
        tags=tags,
    )


async def resolve_metadata(
    model_id: str,
    settings: Settings,
    client: httpx.AsyncClient,
) -> ModelMetadata:
    """Resolve one model's metadata, never raising on lookup failure."""
    family = detect_family(model_id)
    try:
        if family is Provider.HUGGINGFACE:
            data = await fetch_huggingface_model(client, model_id, settings)
            return metadata_from_hub(model_id, data)
        return FAMILIES[family].lookup(model_id)
    except LOOKUP_ERRORS as e:
        logger.warning(f"Error fetching metadata for model {model_id}: {e}")
        return ModelMetadata.default(model_id)


def project_metadata(metadata: ModelMetadata, metrics: list[str]) -> dict[str, Any]:
    """Keep ``id`` plus only the requested metric fields.

    Unrequested fields are absent from the row, not null or zero.
    """
    row: dict[str, Any] = {"id": metadata.id}
    for metric in metrics:
        value = getattr(metadata, metric)
        row[metric] = value.model_dump() if hasattr(value, "model_dump") else value
    return row


async def compare_models(
    request: CompareRequest,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[dict[str, Any]]:
    """Return one projected row per requested model, in request order.

    Duplicate model ids produce duplicate rows.
    """
    validate_compare_request(request)
    settings = settings or get_settings()

    async with http_client(settings, client) as http:
        resolved = await asyncio.gather(
            *(resolve_metadata(model_id, settings, http) for model_id in request.models)
        )

    return [project_metadata(metadata, request.metrics) for metadata in resolved]
