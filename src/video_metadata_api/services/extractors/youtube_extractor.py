"""YouTube platform extractor: redirect resolution + oEmbed."""
from __future__ import annotations

import logging
from typing import Optional

from video_metadata_api.models import VideoMetadata
from video_metadata_api.services.redirect_resolver import resolve_redirects
from video_metadata_api.services.video_url_normalizer import (
    extract_youtube_video_id,
    youtube_thumbnail_url,
    youtube_watch_url,
)
from .base import PlatformExtractor, ExtractionError
from . import register_extractor

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_NAME = "Unknown Channel"


class YouTubeExtractor(PlatformExtractor):
    @staticmethod
    def platform_name() -> str:
        return "youtube"

    async def extract(self, url: str, original_url: Optional[str] = None) -> VideoMetadata:
        resolved_url = await resolve_redirects(self.client, url)

        oembed = await self.oembed.fetch_youtube_oembed(resolved_url)
        if not oembed.success:
            raise ExtractionError.from_oembed(oembed)

        video_id = extract_youtube_video_id(resolved_url)
        if not video_id:
            logger.debug(f"No YouTube video ID in {resolved_url}, keeping resolved URL as deep link")

        thumbnail = oembed.text("thumbnail_url")
        if not thumbnail and video_id:
            thumbnail = youtube_thumbnail_url(video_id)

        return VideoMetadata(
            success=True,
            platform="youtube",
            creator=oembed.text("author_name") or DEFAULT_CHANNEL_NAME,
            creator_url=oembed.text("author_url"),
            title=oembed.text("title"),
            thumbnail=thumbnail,
            original_url=original_url if original_url is not None else url,
            deep_link=youtube_watch_url(video_id) if video_id else resolved_url,
        )


register_extractor(YouTubeExtractor)
