"""Demo-URL API routes."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from modelhub.config import Settings, get_settings
from modelhub.errors import InvalidRequestError
from modelhub.models.common import VALID_PROVIDERS
from modelhub.models.demo import DemoURLRequest, DemoURLResponse
from modelhub.routers.responses import error_response, read_json_object
from modelhub.services.demo_resolver import fetch_demo_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/demo", tags=["demo"])


@router.post("")
async def demo(request: Request, settings: Settings = Depends(get_settings)) -> JSONResponse:
    """Return ``{"demoUrl": ...}`` for a model."""
    try:
        body = await read_json_object(request)
    except InvalidRequestError as e:
        return error_response(400, str(e))

    model_id = body.get("modelId")
    provider = body.get("provider")
    if not isinstance(model_id, str) or not model_id.strip():
        return error_response(400, "Model ID is required")
    if not isinstance(provider, str) or not provider.strip():
        return error_response(400, "Provider is required")
    if provider not in VALID_PROVIDERS:
        return error_response(
            400,
            f"Invalid provider: {provider}. Valid providers are: {', '.join(VALID_PROVIDERS)}",
        )

    try:
        demo_url = await fetch_demo_url(
            DemoURLRequest(model_id=model_id, provider=provider), settings=settings
        )
    except Exception as e:
        logger.error(f"Demo URL error: {e}")
        return error_response(500, str(e))
    return JSONResponse(content=DemoURLResponse(demo_url=demo_url).model_dump(by_alias=True))
