"""Model comparison API routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from modelhub.config import Settings, get_settings
from modelhub.errors import InvalidRequestError
from modelhub.models.compare import CompareRequest
from modelhub.routers.responses import error_response, read_json_object
from modelhub.services.comparator import compare_models, validate_compare_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/compare", tags=["compare"])


def parse_compare_request(body: dict[str, Any]) -> CompareRequest:
    """Validate the request shape ahead of the comparator.

    Raises:
        InvalidRequestError: missing/empty arrays or unknown metric names
    """
    for field in ("models", "metrics"):
        value = body.get(field)
        if not isinstance(value, list) or not value:
            raise InvalidRequestError(f"Invalid request: {field} must be a non-empty array")

    try:
        request = CompareRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid request: {e}") from None

    validate_compare_request(request)
    return request


@router.post("")
async def compare(request: Request, settings: Settings = Depends(get_settings)) -> JSONResponse:
    """Compare models on the requested metrics.

    Each row holds ``id`` plus only the requested metrics, in request order.
    """
    try:
        body = await read_json_object(request)
        payload = parse_compare_request(body)
    except InvalidRequestError as e:
        return error_response(400, str(e))

    try:
        rows = await compare_models(payload, settings=settings)
    except Exception as e:
        logger.error(f"Error comparing models: {e}")
        return error_response(500, "Failed to compare models", details=str(e))
    return JSONResponse(content=rows)
