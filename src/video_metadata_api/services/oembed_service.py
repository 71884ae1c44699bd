"""
oEmbed service for fetching video metadata from various platforms.

Supports:
- TikTok oEmbed API
- Instagram oEmbed API
- YouTube oEmbed API
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from video_metadata_api.models import Platform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OEmbedResponse:
    """Outcome of one oEmbed call: the decoded payload or an error."""
    success: bool
    platform: Platform
    data: Dict[str, Any] = field(default_factory=dict)

    # Error info
    status_code: Optional[int] = None
    error: Optional[str] = None

    def text(self, key: str) -> str:
        """Return a string field from the payload, "" if missing or not a string."""
        value = self.data.get(key)
        return value if isinstance(value, str) else ""


class OEmbedService:
    """Service for fetching oEmbed metadata from video platforms."""

    # oEmbed endpoint URLs
    TIKTOK_OEMBED_URL = "https://www.tiktok.com/oembed"
    INSTAGRAM_OEMBED_URL = "https://api.instagram.com/oembed"
    YOUTUBE_OEMBED_URL = "https://www.youtube.com/oembed"

    PLATFORM_LABELS: Dict[str, str] = {
        "tiktok": "TikTok",
        "instagram": "Instagram",
        "youtube": "YouTube",
    }

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def fetch_tiktok_oembed(self, url: str) -> OEmbedResponse:
        """TikTok's oEmbed is publicly accessible and accepts the full video URL."""
        return await self._fetch("tiktok", self.TIKTOK_OEMBED_URL, {"url": url})

    async def fetch_instagram_oembed(self, url: str) -> OEmbedResponse:
        """
        Fetch oEmbed data from Instagram.

        The public endpoint is rate limited and often refuses requests
        without an app token, so callers should treat failure as routine.
        """
        return await self._fetch("instagram", self.INSTAGRAM_OEMBED_URL, {"url": url})

    async def fetch_youtube_oembed(self, url: str) -> OEmbedResponse:
        """YouTube's oEmbed is publicly accessible without authentication."""
        return await self._fetch(
            "youtube", self.YOUTUBE_OEMBED_URL, {"url": url, "format": "json"}
        )

    async def _fetch(
        self, platform: Platform, endpoint: str, params: Dict[str, str]
    ) -> OEmbedResponse:
        label = self.PLATFORM_LABELS[platform]

        try:
            response = await self.client.get(
                endpoint,
                params=params,
                headers={"Accept": "application/json"},
            )
        except httpx.TimeoutException:
            logger.warning(f"{label} oEmbed request timed out for {params['url']}")
            return OEmbedResponse(
                success=False,
                platform=platform,
                error=f"{label} oEmbed request timed out",
            )
        except httpx.HTTPError as e:
            logger.warning(f"{label} oEmbed request failed for {params['url']}: {e}")
            return OEmbedResponse(
                success=False,
                platform=platform,
                error=f"{label} oEmbed request failed: {e}",
            )

        if not response.is_success:
            logger.warning(f"{label} oEmbed returned HTTP {response.status_code} for {params['url']}")
            return OEmbedResponse(
                success=False,
                platform=platform,
                status_code=response.status_code,
                error=f"{label} oEmbed failed: {response.status_code}",
            )

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"{label} oEmbed returned a non-JSON body for {params['url']}")
            return OEmbedResponse(
                success=False,
                platform=platform,
                status_code=response.status_code,
                error=f"{label} oEmbed returned an invalid response",
            )
        # Valid JSON that is not an object carries no fields
        if not isinstance(data, dict):
            data = {}

        logger.debug(f"{label} oEmbed data keys: {list(data.keys())}")
        return OEmbedResponse(
            success=True,
            platform=platform,
            data=data,
            status_code=response.status_code,
        )
