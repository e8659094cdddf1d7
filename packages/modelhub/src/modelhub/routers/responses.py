"""JSON body parsing and the ``{"error": ...}`` envelope shared by the routers."""

import json
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from modelhub.errors import InvalidRequestError


async def read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object.

    Raises:
        InvalidRequestError: body is not valid JSON or not an object
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidRequestError("Request body must be valid JSON") from None
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return body


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    content: dict[str, str] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)
