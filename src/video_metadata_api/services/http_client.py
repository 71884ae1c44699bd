"""Shared outbound HTTP client construction."""
from typing import AsyncIterator, Optional

import httpx

from video_metadata_api.config import settings


def build_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create an AsyncClient with the configured timeout and User-Agent."""
    return httpx.AsyncClient(
        timeout=settings.REQUEST_TIMEOUT,
        headers={"User-Agent": settings.USER_AGENT},
        transport=transport,
    )


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency yielding a client scoped to one request."""
    async with build_client() as client:
        yield client
