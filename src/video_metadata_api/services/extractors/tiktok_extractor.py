"""TikTok platform extractor: redirect resolution + oEmbed."""
from __future__ import annotations

from typing import Optional

from video_metadata_api.models import VideoMetadata
from video_metadata_api.services.redirect_resolver import resolve_redirects
from video_metadata_api.services.video_url_normalizer import (
    extract_tiktok_username,
    extract_tiktok_video_id,
    tiktok_profile_url,
    tiktok_video_url,
)
from .base import PlatformExtractor, ExtractionError
from . import register_extractor


class TikTokExtractor(PlatformExtractor):
    @staticmethod
    def platform_name() -> str:
        return "tiktok"

    async def extract(self, url: str, original_url: Optional[str] = None) -> VideoMetadata:
        # vm.tiktok.com links only carry the video ID after resolution
        resolved_url = await resolve_redirects(self.client, url)

        oembed = await self.oembed.fetch_tiktok_oembed(resolved_url)
        if not oembed.success:
            raise ExtractionError.from_oembed(oembed)

        username = (
            oembed.text("author_unique_id")
            or oembed.text("author_name")
            or extract_tiktok_username(resolved_url)
        )
        profile_url = tiktok_profile_url(username)
        video_id = extract_tiktok_video_id(resolved_url)

        return VideoMetadata(
            success=True,
            platform="tiktok",
            creator=f"@{username}",
            creator_url=oembed.text("author_url") or profile_url,
            title=oembed.text("title"),
            thumbnail=oembed.text("thumbnail_url"),
            original_url=original_url if original_url is not None else url,
            deep_link=tiktok_video_url(username, video_id) if video_id else profile_url,
        )


register_extractor(TikTokExtractor)
