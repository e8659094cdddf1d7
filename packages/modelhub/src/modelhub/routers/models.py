"""Model catalog API routes."""

from fastapi import APIRouter, Depends

from modelhub.catalog import list_catalog
from modelhub.config import Settings, get_settings
from modelhub.models.compare import CatalogEntry, ModelMetadata
from modelhub.services.comparator import resolve_metadata
from modelhub.services.http import http_client

router = APIRouter(tags=["models"])


@router.get("/models", response_model=list[CatalogEntry])
async def list_models() -> list[CatalogEntry]:
    """List models with a static price/capability entry."""
    return list_catalog()


@router.get(
    "/models/{model_id:path}", response_model=ModelMetadata, response_model_exclude={"tags"}
)
async def get_model(model_id: str, settings: Settings = Depends(get_settings)) -> ModelMetadata:
    """Resolve full metadata for one model.

    Unknown or unreachable models resolve to the all-default record.
    """
    async with http_client(settings) as client:
        return await resolve_metadata(model_id, settings, client)


@router.get("/providers")
async def list_providers(settings: Settings = Depends(get_settings)) -> dict[str, bool]:
    """Provider tags mapped to whether their credential is configured."""
    return settings.configured_providers()
