"""Inference API routes."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from modelhub.config import Settings, get_settings
from modelhub.models.inference import InferenceRequest
from modelhub.routers.responses import error_response, read_json_object
from modelhub.services.inference_runner import run_inference

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inference", tags=["inference"])


@router.post("")
async def inference(request: Request, settings: Settings = Depends(get_settings)) -> JSONResponse:
    """Run one upstream inference call and return the provider's response body.

    Every failure, including an unknown provider or a missing credential,
    is reported as 500 with ``{"error": message}``.
    """
    try:
        body = await read_json_object(request)
        payload = InferenceRequest.model_validate(body)
        result = await run_inference(payload, settings=settings)
    except Exception as e:
        logger.error(f"Inference error: {e}")
        return error_response(500, str(e))
    return JSONResponse(content=result)
