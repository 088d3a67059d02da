"""API routes implementation."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
    DeleteResponse,
    ErrorResponse,
)
from ..dependencies import require_api_key
from ..links import short_url_for
from lib.errors import (
    DuplicateCodeError,
    NotFoundError,
    StoreError,
    ValidationError,
)

router = APIRouter(dependencies=[Depends(require_api_key)])

API_PATH = "/api-short"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request or store failure"},
    401: {"model": ErrorResponse, "description": "Missing or invalid X-API-Key"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error body used by every API failure."""
    return JSONResponse(status_code=status_code, content={"error": message})


def invalid_request() -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")


@router.post(
    API_PATH,
    response_model=ShortenResponse,
    responses=ERROR_RESPONSES,
    summary="Create short URL",
    description="Create a short URL. Omit custom_code for a random 6-character code.",
)
async def create_short_url(request: Request):
    """Create a shortened URL."""
    service = request.app.state.service
    logger = request.app.state.logger

    # Body is parsed here rather than by FastAPI so the key check runs first
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        return error_response(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    try:
        body = ShortenRequest.model_validate(payload)
    except SchemaValidationError:
        return error_response(status.HTTP_400_BAD_REQUEST, "url and custom_code must be strings")

    try:
        result = await service.create_short_url(
            original_url=body.url,
            custom_code=body.custom_code,
        )

        return ShortenResponse(
            short_code=result["short_code"],
            short_url=short_url_for(request, result["short_code"]),
            original_url=result["original_url"],
        )

    except (ValidationError, DuplicateCodeError, StoreError) as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        logger.exception(f"Unexpected error creating short URL: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get(
    API_PATH,
    response_model=URLInfoResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "Short code not found"}},
    summary="Get short URL",
    description="Get the stored mapping for a short code.",
)
async def get_short_url(request: Request, code: Optional[str] = Query(None)):
    """Look up a short code."""
    if not code:
        return invalid_request()

    service = request.app.state.service
    logger = request.app.state.logger

    try:
        mapping = await service.get_url_info(code)
        return URLInfoResponse(**mapping.to_dict())
    except NotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    except Exception as e:
        logger.exception(f"Error looking up {code}: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.delete(
    API_PATH,
    response_model=DeleteResponse,
    responses=ERROR_RESPONSES,
    summary="Delete short URL",
    description="Delete a short code. Deleting a code that does not exist still succeeds.",
)
async def delete_short_url(request: Request, code: Optional[str] = Query(None)):
    """Delete a short code."""
    if not code:
        return invalid_request()

    service = request.app.state.service
    logger = request.app.state.logger

    try:
        await service.delete_short_url(code)
        return DeleteResponse()
    except Exception as e:
        logger.exception(f"Error deleting {code}: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.api_route(
    API_PATH,
    methods=["PUT", "PATCH", "OPTIONS", "HEAD"],
    include_in_schema=False,
)
async def unsupported_method(request: Request):
    """Any other verb on the API endpoint."""
    return invalid_request()
