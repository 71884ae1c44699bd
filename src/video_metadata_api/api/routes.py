"""API routes for video metadata extraction."""

import logging
from typing import Any, Dict

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from video_metadata_api.models import BatchResponse, ErrorResponse, ExtractRequest
from video_metadata_api.services.http_client import get_http_client
from video_metadata_api.services.metadata_service import MetadataService

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

MISSING_URL_ERROR = "Provide 'url' or 'urls' in request body"


def _json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, headers=CORS_HEADERS)


def _error_response(message: str, status_code: int) -> JSONResponse:
    return _json_response(ErrorResponse(error=message).model_dump(), status_code=status_code)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Metadata extraction
# ---------------------------------------------------------------------------


@router.options("/{path:path}")
async def preflight(path: str) -> Response:
    """CORS preflight for any path."""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/{path:path}")
async def extract_metadata(
    path: str,
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Extract normalized metadata from TikTok, Instagram or YouTube URLs.

    Accepts:
    - {"url": "..."}: returns a single VideoMetadata object
    - {"urls": ["...", ...]}: returns {"results": [VideoMetadata, ...]}

    Per-URL failures are reported in the body with status 200.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        logger.exception("Could not decode request body")
        return _error_response(str(exc), status_code=500)

    try:
        body = ExtractRequest.model_validate(payload)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        return _error_response(f"Invalid request body: {errors}", status_code=400)

    try:
        service = MetadataService(client)

        if body.url:
            metadata = await service.extract(body.url)
            return _json_response(metadata.to_response())

        if body.urls is not None:
            logger.info(f"Extracting metadata for batch of {len(body.urls)} URLs")
            results = await service.extract_many(body.urls)
            return _json_response(BatchResponse(results=results).to_response())

        return _error_response(MISSING_URL_ERROR, status_code=400)

    except Exception as exc:
        logger.exception("Unexpected error handling metadata request")
        return _error_response(str(exc), status_code=500)
