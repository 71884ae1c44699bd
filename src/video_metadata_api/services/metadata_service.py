"""
Metadata extraction service.

Wraps the per-platform extractors with the per-URL error boundary: whatever
goes wrong while extracting one URL ends up as a failed VideoMetadata record
and never escapes to the caller.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from video_metadata_api.models import Platform, VideoMetadata
from video_metadata_api.services.extractors import ExtractionError, get_extractor
from video_metadata_api.services.video_url_normalizer import detect_platform

logger = logging.getLogger(__name__)

UNSUPPORTED_PLATFORM_ERROR = "Unsupported platform. Use TikTok, Instagram, or YouTube URLs."


class MetadataService:
    """Extracts normalized metadata for one or many video URLs."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def extract(self, url: str) -> VideoMetadata:
        """
        Extract metadata for a single URL.

        Args:
            url: Video URL as supplied by the caller; echoed back unchanged
                as ``originalUrl``

        Returns:
            VideoMetadata, with ``success=False`` and ``error`` set on failure
        """
        cleaned = url.strip()

        try:
            platform = detect_platform(cleaned)
            if platform is None:
                return VideoMetadata.failure(url, "unknown", UNSUPPORTED_PLATFORM_ERROR)

            extractor = get_extractor(platform, self.client)
            return await extractor.extract(cleaned, original_url=url)
        except ExtractionError as e:
            logger.info(f"Metadata extraction failed for {cleaned}: {e}")
            return self._failure(url, e, platform=e.platform)
        except Exception as e:
            logger.exception(f"Unexpected error extracting metadata for {cleaned}")
            return self._failure(url, e)

    async def extract_many(self, urls: Sequence[str]) -> List[VideoMetadata]:
        """Extract every URL concurrently; results keep the input order."""
        results = await asyncio.gather(*(self.extract(url) for url in urls))
        return list(results)

    @staticmethod
    def _failure(url: str, error: Exception, platform: Optional[Platform] = None) -> VideoMetadata:
        platform = platform or detect_platform(url.strip()) or "unknown"
        message = str(error) or error.__class__.__name__
        return VideoMetadata.failure(url, platform, message)
