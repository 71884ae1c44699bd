"""Base classes for platform extractors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import httpx

from video_metadata_api.models import Platform, VideoMetadata
from video_metadata_api.services.oembed_service import OEmbedResponse, OEmbedService


class ExtractionError(RuntimeError):
    """Raised when a platform extractor cannot produce metadata."""

    def __init__(
        self,
        message: str,
        platform: Optional[Platform] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.platform = platform
        self.status_code = status_code

    @classmethod
    def from_oembed(cls, response: OEmbedResponse) -> "ExtractionError":
        return cls(
            response.error or "oEmbed request failed",
            platform=response.platform,
            status_code=response.status_code,
        )


class PlatformExtractor(ABC):
    """Abstract base class for all platform metadata extractors."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.oembed = OEmbedService(client)

    @staticmethod
    @abstractmethod
    def platform_name() -> Platform:
        """Return the canonical platform identifier (e.g. 'tiktok')."""
        ...

    @abstractmethod
    async def extract(self, url: str, original_url: Optional[str] = None) -> VideoMetadata:
        """Extract metadata for ``url``.

        ``original_url`` is echoed back as ``originalUrl`` and defaults to ``url``.
        """
        ...
